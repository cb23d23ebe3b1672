"""The trigger handler contract.

A handler supplies business logic for some subset of the seven
record-lifecycle callbacks. There is no "before undelete" callback: host
runtimes do not expose that phase.
"""

from typing import Any, Protocol, runtime_checkable

from triggerforge.core.types import Record, RecordMap

# Every callback a handler must provide, in (phase, operation) table order.
HANDLER_CALLBACKS = (
    "before_insert",
    "before_update",
    "before_delete",
    "after_insert",
    "after_update",
    "after_delete",
    "after_undelete",
)


@runtime_checkable
class TriggerHandler(Protocol):
    """Protocol that all trigger handlers must implement.

    Callbacks return nothing. Mutating the records or issuing further
    operations is entirely up to the implementation, and any exception a
    callback raises propagates to whoever fired the trigger.
    """

    def before_insert(self, new_records: list[Record]) -> None:
        """Called before new records are persisted, in submission order."""
        ...

    def before_update(self, old_by_id: RecordMap, new_by_id: RecordMap) -> None:
        """Called before changes to existing records are persisted."""
        ...

    def before_delete(self, old_by_id: RecordMap) -> None:
        """Called before records are deleted."""
        ...

    def after_insert(self, new_by_id: RecordMap) -> None:
        """Called after new records are persisted and have ids."""
        ...

    def after_update(self, old_by_id: RecordMap, new_by_id: RecordMap) -> None:
        """Called after changes to existing records are persisted."""
        ...

    def after_delete(self, old_by_id: RecordMap) -> None:
        """Called after records are deleted."""
        ...

    def after_undelete(self, new_by_id: RecordMap) -> None:
        """Called after deleted records are restored."""
        ...


def implements_contract(candidate: Any) -> bool:
    """Check that ``candidate`` provides every callback as a callable.

    ``isinstance`` against a runtime-checkable Protocol only checks that the
    attributes exist, so the callables are verified explicitly.
    """
    if not isinstance(candidate, TriggerHandler):
        return False
    return all(callable(getattr(candidate, name, None)) for name in HANDLER_CALLBACKS)
