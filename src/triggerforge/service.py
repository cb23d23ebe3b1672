"""Trigger execution service for TriggerForge.

Looks up the handler bound to the context's entity and runs it through
the entry point.
"""

import logging

from triggerforge.config import TriggerConfig
from triggerforge.core.types import ExecutionContext
from triggerforge.dispatch.dispatcher import has_route
from triggerforge.dispatch.entry import create_and_execute_handler
from triggerforge.dispatch.guard import ReentrancyGuard

logger = logging.getLogger(__name__)


class TriggerService:
    """Fires configured trigger handlers for entity lifecycle events."""

    def __init__(self, config: TriggerConfig):
        self.config = config

    def fire(
        self,
        ctx: ExecutionContext,
        guard: ReentrancyGuard | None = None,
        mark_guard: bool = False,
    ) -> bool:
        """Run the handler bound to ``ctx.entity_name``.

        Args:
            ctx: The host's execution context
            guard: Caller-owned reentrancy token for this operation batch
            mark_guard: Once a callback has run and returned, mark its
                (phase, operation) pair on ``guard`` so later fires of the
                same pair sharing it are skipped. Other pairs still run.

        Returns:
            True if a binding was found and the entry point was invoked,
            False if the entity has no active binding.

        Raises:
            HandlerNotFoundError: If the bound handler is not registered or
                does not implement the contract
        """
        if ctx.entity_name is None:
            logger.debug("Context has no entity name, skipping")
            return False

        binding = self.config.binding_for(ctx.entity_name)
        if binding is None:
            logger.debug("No trigger bound to '%s', skipping", ctx.entity_name)
            return False

        if not binding.active:
            logger.debug(
                "Trigger '%s' for '%s' is inactive, skipping",
                binding.handler,
                ctx.entity_name,
            )
            return False

        pair = (ctx.phase, ctx.operation)
        will_run = has_route(ctx) and not (
            guard is not None and guard.is_executed_for(pair)
        )
        create_and_execute_handler(binding.handler, ctx, guard)

        if mark_guard and guard is not None and will_run:
            guard.mark_executed(pair)

        return True
