"""Handler registry for TriggerForge.

Maps stable handler names to the constructors that build them, so callers
can name a handler without the package reflecting over types at runtime.
"""

from collections.abc import Callable
from typing import Any, TypeVar

# Handler constructor: a class or zero-argument factory returning a handler
HandlerConstructor = Callable[[], Any]

_C = TypeVar("_C", bound=HandlerConstructor)


class HandlerRegistry:
    """Registry for trigger handler constructors.

    Handlers must be explicitly registered before they can be referenced
    by name from the entry point or the trigger configuration. Registration
    is typically done at import time via the @trigger_handler decorator.

    Example:
        @trigger_handler("AccountTriggerHandler")
        class AccountTriggerHandler(BaseTriggerHandler):
            ...
    """

    _constructors: dict[str, HandlerConstructor] = {}

    @classmethod
    def register(cls, name: str, constructor: HandlerConstructor) -> None:
        """Register a handler constructor by name.

        Registering the same constructor again is a no-op.

        Args:
            name: Unique identifier for the handler
            constructor: Class or zero-argument factory producing the handler

        Raises:
            ValueError: If a different constructor is already registered
                under this name
        """
        existing = cls._constructors.get(name)
        if existing is constructor:
            return
        if existing is not None:
            raise ValueError(
                f"Trigger handler '{name}' is already registered to {existing!r}, "
                f"cannot register {constructor!r}"
            )
        cls._constructors[name] = constructor

    @classmethod
    def get(cls, name: str) -> HandlerConstructor:
        """Get a registered handler constructor by name.

        Raises:
            ValueError: If no handler is registered under this name
        """
        if name not in cls._constructors:
            raise ValueError(
                f"Trigger handler '{name}' is not registered. "
                "Handlers must be explicitly registered at application startup."
            )
        return cls._constructors[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a handler is registered."""
        return name in cls._constructors

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all registered handler names."""
        return sorted(cls._constructors.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._constructors.clear()


def trigger_handler(name: str | None = None) -> Callable[[_C], _C]:
    """Decorator to register a handler class or factory.

    The handler is registered under ``name``, or under its ``__name__``
    when no name is given.

    Usage:
        @trigger_handler()
        class ContactTriggerHandler(BaseTriggerHandler):
            ...
    """

    def decorator(constructor: _C) -> _C:
        HandlerRegistry.register(name or constructor.__name__, constructor)
        return constructor

    return decorator
