"""Trigger dispatch: routing, reentrancy guard and the public entry point."""

from triggerforge.dispatch.dispatcher import DISPATCH_TABLE, dispatch, has_route
from triggerforge.dispatch.entry import HandlerNotFoundError, create_and_execute_handler
from triggerforge.dispatch.guard import ReentrancyGuard

__all__ = [
    "DISPATCH_TABLE",
    "HandlerNotFoundError",
    "ReentrancyGuard",
    "create_and_execute_handler",
    "dispatch",
    "has_route",
]
