"""Routes an execution context to exactly one handler callback.

Routing is a lookup in DISPATCH_TABLE, keyed by (phase, operation). Each
entry invokes one callback with the payloads that pair carries. Pairs absent
from the table (before undelete) invoke nothing.
"""

import logging
from collections.abc import Callable

from triggerforge.core.types import ExecutionContext, Operation, Phase
from triggerforge.handlers.contract import TriggerHandler

logger = logging.getLogger(__name__)

Route = Callable[[TriggerHandler, ExecutionContext], None]

DISPATCH_TABLE: dict[tuple[Phase, Operation], Route] = {
    (Phase.BEFORE, Operation.INSERT): lambda h, ctx: h.before_insert(ctx.new_records),
    (Phase.BEFORE, Operation.UPDATE): lambda h, ctx: h.before_update(
        ctx.old_by_id, ctx.new_by_id
    ),
    (Phase.BEFORE, Operation.DELETE): lambda h, ctx: h.before_delete(ctx.old_by_id),
    (Phase.AFTER, Operation.INSERT): lambda h, ctx: h.after_insert(ctx.new_by_id),
    (Phase.AFTER, Operation.UPDATE): lambda h, ctx: h.after_update(
        ctx.old_by_id, ctx.new_by_id
    ),
    (Phase.AFTER, Operation.DELETE): lambda h, ctx: h.after_delete(ctx.old_by_id),
    (Phase.AFTER, Operation.UNDELETE): lambda h, ctx: h.after_undelete(ctx.new_by_id),
}


def has_route(ctx: ExecutionContext) -> bool:
    """True when dispatching ``ctx`` would invoke a callback."""
    return ctx.is_active and (ctx.phase, ctx.operation) in DISPATCH_TABLE


def dispatch(ctx: ExecutionContext, handler: TriggerHandler) -> None:
    """Invoke the one callback matching the context's (phase, operation).

    Does nothing when the host reports no operation in flight. Exceptions
    raised by the callback propagate unchanged.

    Args:
        ctx: The host's execution context
        handler: A resolved handler instance
    """
    if not ctx.is_active:
        logger.debug("No operation in flight, skipping dispatch")
        return

    route = DISPATCH_TABLE.get((ctx.phase, ctx.operation))
    if route is None:
        logger.debug(
            "No callback for %s %s", ctx.phase.value, ctx.operation.value
        )
        return

    logger.debug(
        "Dispatching %s %s to %s",
        ctx.phase.value,
        ctx.operation.value,
        type(handler).__name__,
    )
    route(handler, ctx)
