"""TriggerForge record lifecycle trigger dispatcher.

Routes record-lifecycle events from a host persistence runtime to a
pluggable handler. Handlers implement only the phases they care about:
- before_insert / after_insert
- before_update / after_update
- before_delete / after_delete
- after_undelete

Usage:
    from triggerforge import (
        BaseTriggerHandler,
        ExecutionContext,
        create_and_execute_handler,
        trigger_handler,
    )

    @trigger_handler("AccountTriggerHandler")
    class AccountTriggerHandler(BaseTriggerHandler):
        def before_insert(self, new_records):
            for record in new_records:
                record.setdefault("rating", "cold")

    ctx = ExecutionContext.before_insert([{"name": "Acme"}], entity_name="Account")
    create_and_execute_handler("AccountTriggerHandler", ctx)
"""

from triggerforge.config import TriggerBinding, TriggerConfig, TriggerConfigError
from triggerforge.core.types import ExecutionContext, Operation, Phase
from triggerforge.dispatch import (
    HandlerNotFoundError,
    ReentrancyGuard,
    create_and_execute_handler,
    dispatch,
)
from triggerforge.handlers import (
    BaseTriggerHandler,
    HandlerFactory,
    HandlerRegistry,
    TriggerHandler,
    trigger_handler,
)
from triggerforge.service import TriggerService

__all__ = [
    "BaseTriggerHandler",
    "ExecutionContext",
    "HandlerFactory",
    "HandlerNotFoundError",
    "HandlerRegistry",
    "Operation",
    "Phase",
    "ReentrancyGuard",
    "TriggerBinding",
    "TriggerConfig",
    "TriggerConfigError",
    "TriggerHandler",
    "TriggerService",
    "create_and_execute_handler",
    "dispatch",
    "trigger_handler",
]
