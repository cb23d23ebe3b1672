"""Core TriggerForge types shared by handlers and the dispatcher."""

from triggerforge.core.types import ExecutionContext, Operation, Phase, Record, RecordMap

__all__ = ["ExecutionContext", "Operation", "Phase", "Record", "RecordMap"]
