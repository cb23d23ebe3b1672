"""No-op base implementation of the trigger handler contract."""

from triggerforge.core.types import Record, RecordMap


class BaseTriggerHandler:
    """Handler with every callback as a no-op.

    Subclass and override only the callbacks you need. Subclassing is
    optional: any class providing all seven callbacks satisfies
    TriggerHandler on its own.

    Example:
        @trigger_handler("AccountTriggerHandler")
        class AccountTriggerHandler(BaseTriggerHandler):
            def before_insert(self, new_records):
                for record in new_records:
                    record.setdefault("status", "new")
    """

    def before_insert(self, new_records: list[Record]) -> None:
        pass

    def before_update(self, old_by_id: RecordMap, new_by_id: RecordMap) -> None:
        pass

    def before_delete(self, old_by_id: RecordMap) -> None:
        pass

    def after_insert(self, new_by_id: RecordMap) -> None:
        pass

    def after_update(self, old_by_id: RecordMap, new_by_id: RecordMap) -> None:
        pass

    def after_delete(self, old_by_id: RecordMap) -> None:
        pass

    def after_undelete(self, new_by_id: RecordMap) -> None:
        pass
