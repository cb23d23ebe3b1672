"""Public entry point: resolve a handler and dispatch the context to it."""

import logging

from triggerforge.core.types import ExecutionContext
from triggerforge.dispatch.dispatcher import dispatch
from triggerforge.dispatch.guard import ReentrancyGuard
from triggerforge.handlers.factory import HandlerFactory, HandlerRef

logger = logging.getLogger(__name__)


class HandlerNotFoundError(Exception):
    """Raised when a type reference does not resolve to a trigger handler."""

    def __init__(self, handler_name: str):
        self.handler_name = handler_name
        super().__init__(f"No Trigger Handler found named: {handler_name}")


def create_and_execute_handler(
    type_ref: HandlerRef,
    ctx: ExecutionContext,
    guard: ReentrancyGuard | None = None,
) -> None:
    """Build the handler named by ``type_ref`` and run it for ``ctx``.

    Args:
        type_ref: Registered handler name or handler class
        ctx: The host's execution context
        guard: Caller-owned reentrancy token for this operation batch.
            A fresh, clear guard is used when omitted.

    Raises:
        HandlerNotFoundError: If ``type_ref`` does not resolve to a handler.
            Raised before the guard is consulted.
    """
    handler = HandlerFactory.resolve(type_ref)
    if handler is None:
        raise HandlerNotFoundError(HandlerFactory.display_name(type_ref))

    if guard is None:
        guard = ReentrancyGuard()

    if guard.is_executed or (
        ctx.is_active and guard.is_executed_for((ctx.phase, ctx.operation))
    ):
        logger.debug(
            "Guard already set, skipping '%s'", HandlerFactory.display_name(type_ref)
        )
        return

    dispatch(ctx, handler)
