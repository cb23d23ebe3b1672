"""Core types for TriggerForge.

Defines the data the host runtime hands over for each record-lifecycle event:
- Phase: whether the host has already persisted the change
- Operation: the kind of record change in flight
- ExecutionContext: the active (phase, operation) pair plus record payloads

Records are opaque to this package. In practice they are ``dict[str, Any]``
snapshots, keyed by record id in the ``*_by_id`` maps.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Record = Any
RecordMap = dict[str, Record]


class Phase(Enum):
    """Whether the operation has already been committed by the host."""

    BEFORE = "before"
    AFTER = "after"


class Operation(Enum):
    """The kind of record change in flight."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    UNDELETE = "undelete"


@dataclass
class ExecutionContext:
    """Host-supplied description of the event currently being processed.

    Exactly one (phase, operation) pair is active per context. Which payload
    fields are populated depends on that pair:

    - before insert: ``new_records`` (ordered, records have no ids yet)
    - after insert: ``new_by_id``
    - update: ``old_by_id`` and ``new_by_id``
    - delete: ``old_by_id``
    - after undelete: ``new_by_id``

    Attributes:
        phase: BEFORE or AFTER, None outside an active dispatch
        operation: INSERT, UPDATE, DELETE or UNDELETE, None outside an active dispatch
        new_records: New records in submission order (before insert only)
        new_by_id: id -> new/restored record
        old_by_id: id -> record as it was before the change
        is_executing: False when the host reports no operation in flight
        entity_name: Record type the event belongs to (e.g. "Account")
    """

    phase: Phase | None = None
    operation: Operation | None = None
    new_records: list[Record] = field(default_factory=list)
    new_by_id: RecordMap = field(default_factory=dict)
    old_by_id: RecordMap = field(default_factory=dict)
    is_executing: bool = True
    entity_name: str | None = None

    @property
    def is_active(self) -> bool:
        """True when a (phase, operation) pair is actually in flight."""
        return (
            self.is_executing
            and self.phase is not None
            and self.operation is not None
        )

    @property
    def is_before(self) -> bool:
        return self.is_active and self.phase is Phase.BEFORE

    @property
    def is_after(self) -> bool:
        return self.is_active and self.phase is Phase.AFTER

    # -- Constructors for each well-formed context ---------------------------

    @classmethod
    def inactive(cls, entity_name: str | None = None) -> "ExecutionContext":
        """A context for which the host reports nothing in flight."""
        return cls(is_executing=False, entity_name=entity_name)

    @classmethod
    def before_insert(
        cls, new_records: list[Record], entity_name: str | None = None
    ) -> "ExecutionContext":
        return cls(
            phase=Phase.BEFORE,
            operation=Operation.INSERT,
            new_records=list(new_records),
            entity_name=entity_name,
        )

    @classmethod
    def after_insert(
        cls, new_by_id: RecordMap, entity_name: str | None = None
    ) -> "ExecutionContext":
        return cls(
            phase=Phase.AFTER,
            operation=Operation.INSERT,
            new_by_id=dict(new_by_id),
            entity_name=entity_name,
        )

    @classmethod
    def before_update(
        cls,
        old_by_id: RecordMap,
        new_by_id: RecordMap,
        entity_name: str | None = None,
    ) -> "ExecutionContext":
        return cls(
            phase=Phase.BEFORE,
            operation=Operation.UPDATE,
            old_by_id=dict(old_by_id),
            new_by_id=dict(new_by_id),
            entity_name=entity_name,
        )

    @classmethod
    def after_update(
        cls,
        old_by_id: RecordMap,
        new_by_id: RecordMap,
        entity_name: str | None = None,
    ) -> "ExecutionContext":
        return cls(
            phase=Phase.AFTER,
            operation=Operation.UPDATE,
            old_by_id=dict(old_by_id),
            new_by_id=dict(new_by_id),
            entity_name=entity_name,
        )

    @classmethod
    def before_delete(
        cls, old_by_id: RecordMap, entity_name: str | None = None
    ) -> "ExecutionContext":
        return cls(
            phase=Phase.BEFORE,
            operation=Operation.DELETE,
            old_by_id=dict(old_by_id),
            entity_name=entity_name,
        )

    @classmethod
    def after_delete(
        cls, old_by_id: RecordMap, entity_name: str | None = None
    ) -> "ExecutionContext":
        return cls(
            phase=Phase.AFTER,
            operation=Operation.DELETE,
            old_by_id=dict(old_by_id),
            entity_name=entity_name,
        )

    @classmethod
    def after_undelete(
        cls, new_by_id: RecordMap, entity_name: str | None = None
    ) -> "ExecutionContext":
        return cls(
            phase=Phase.AFTER,
            operation=Operation.UNDELETE,
            new_by_id=dict(new_by_id),
            entity_name=entity_name,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExecutionContext":
        """Create an ExecutionContext from a YAML/JSON dict.

        Expected keys: ``entity``, ``phase``, ``operation``, ``new``, ``old``
        and ``executing`` (defaults to true). ``new`` is a list for a before
        insert and an id -> record map everywhere else.

        Raises:
            ValueError: If phase or operation is not a known value, ``executing``
                is not a boolean, or a payload has the wrong shape for the pair.
        """
        phase_value = data.get("phase")
        operation_value = data.get("operation")
        phase = Phase(str(phase_value).lower()) if phase_value else None
        operation = (
            Operation(str(operation_value).lower()) if operation_value else None
        )

        new = data.get("new")
        old = data.get("old") or {}
        if not isinstance(old, dict):
            raise ValueError("'old' must be a mapping of id to record")

        new_records: list[Record] = []
        new_by_id: RecordMap = {}
        if phase is Phase.BEFORE and operation is Operation.INSERT:
            if new is not None and not isinstance(new, list):
                raise ValueError("'new' must be a list of records for a before insert")
            new_records = list(new or [])
        elif new is not None:
            if not isinstance(new, dict):
                raise ValueError("'new' must be a mapping of id to record")
            new_by_id = {str(k): v for k, v in new.items()}

        executing = data.get("executing", True)
        if not isinstance(executing, bool):
            raise ValueError("'executing' must be true or false")

        return cls(
            phase=phase,
            operation=operation,
            new_records=new_records,
            new_by_id=new_by_id,
            old_by_id={str(k): v for k, v in old.items()},
            is_executing=executing,
            entity_name=data.get("entity"),
        )
