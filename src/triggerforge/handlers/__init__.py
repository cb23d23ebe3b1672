"""Trigger handler contract, registry and factory.

Usage:
    from triggerforge.handlers import BaseTriggerHandler, trigger_handler

    @trigger_handler("AccountTriggerHandler")
    class AccountTriggerHandler(BaseTriggerHandler):
        def before_insert(self, new_records):
            ...
"""

from triggerforge.handlers.base import BaseTriggerHandler
from triggerforge.handlers.contract import (
    HANDLER_CALLBACKS,
    TriggerHandler,
    implements_contract,
)
from triggerforge.handlers.factory import HandlerFactory, HandlerRef
from triggerforge.handlers.registry import HandlerRegistry, trigger_handler

__all__ = [
    "BaseTriggerHandler",
    "HANDLER_CALLBACKS",
    "HandlerFactory",
    "HandlerRef",
    "HandlerRegistry",
    "TriggerHandler",
    "implements_contract",
    "trigger_handler",
]
