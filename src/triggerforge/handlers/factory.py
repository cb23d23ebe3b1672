"""Resolves handler type references into live handler instances."""

import logging
from typing import Any

from triggerforge.handlers.contract import TriggerHandler, implements_contract
from triggerforge.handlers.registry import HandlerRegistry

logger = logging.getLogger(__name__)

# A registered handler name, or the handler class itself
HandlerRef = str | type


class HandlerFactory:
    """Builds a fresh handler for each invocation.

    Resolution never raises for an unknown name or a type that does not
    satisfy the contract; it returns None and leaves the decision to the
    caller. Exceptions raised by a handler's own constructor propagate.
    """

    @staticmethod
    def display_name(type_ref: Any) -> str:
        """Name used to identify ``type_ref`` in errors and logs."""
        if isinstance(type_ref, str):
            return type_ref
        return getattr(type_ref, "__name__", repr(type_ref))

    @classmethod
    def resolve(cls, type_ref: HandlerRef) -> TriggerHandler | None:
        """Instantiate the handler referred to by ``type_ref``.

        Args:
            type_ref: A registered handler name, or a handler class

        Returns:
            A new handler instance, or None if the reference does not
            resolve to something implementing TriggerHandler.
        """
        if isinstance(type_ref, str):
            if not HandlerRegistry.is_registered(type_ref):
                logger.warning("Trigger handler '%s' is not registered", type_ref)
                return None
            constructor = HandlerRegistry.get(type_ref)
        elif callable(type_ref):
            constructor = type_ref
        else:
            logger.warning("Cannot resolve trigger handler from %r", type_ref)
            return None

        candidate = constructor()
        if not implements_contract(candidate):
            logger.warning(
                "'%s' does not implement the trigger handler contract",
                cls.display_name(type_ref),
            )
            return None

        logger.debug("Resolved trigger handler '%s'", cls.display_name(type_ref))
        return candidate
