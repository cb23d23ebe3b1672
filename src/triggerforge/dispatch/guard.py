"""Reentrancy guard for trigger dispatch."""

from dataclasses import dataclass, field

from triggerforge.core.types import Operation, Phase


@dataclass
class ReentrancyGuard:
    """Token recording which parts of one logical unit of work are handled.

    The guard is owned by the caller and passed explicitly into each
    dispatch belonging to the same operation batch. A batch delivers its
    phases in order (before, then after), so handled work is tracked per
    (phase, operation) pair: marking the before phase never suppresses the
    after phase. Marking the guard without a pair covers the whole batch.
    Nothing in the dispatch path marks it on its own; the owner decides when
    the work counts as handled.

    Not thread-safe: one guard belongs to one batch on one thread.

    Attributes:
        is_executed: True once the whole unit of work has been handled
        handled: (phase, operation) pairs already handled in this batch
    """

    is_executed: bool = False
    handled: set[tuple[Phase, Operation]] = field(default_factory=set)

    def mark_executed(self, pair: tuple[Phase, Operation] | None = None) -> None:
        if pair is None:
            self.is_executed = True
        else:
            self.handled.add(pair)

    def is_executed_for(self, pair: tuple[Phase, Operation]) -> bool:
        return self.is_executed or pair in self.handled

    def reset(self) -> None:
        self.is_executed = False
        self.handled.clear()
