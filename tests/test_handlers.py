"""Tests for the handler contract, registry and factory."""

import logging

import pytest

from triggerforge.handlers import (
    HANDLER_CALLBACKS,
    BaseTriggerHandler,
    HandlerFactory,
    HandlerRegistry,
    TriggerHandler,
    implements_contract,
    trigger_handler,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clear_handler_registry():
    """Clear handler registry before and after each test."""
    HandlerRegistry.clear()
    yield
    HandlerRegistry.clear()


class StructuralHandler:
    """Implements every callback without inheriting the base."""

    def before_insert(self, new_records):
        pass

    def before_update(self, old_by_id, new_by_id):
        pass

    def before_delete(self, old_by_id):
        pass

    def after_insert(self, new_by_id):
        pass

    def after_update(self, old_by_id, new_by_id):
        pass

    def after_delete(self, old_by_id):
        pass

    def after_undelete(self, new_by_id):
        pass


class NotAHandler:
    pass


class PartialHandler:
    def before_insert(self, new_records):
        pass


class NonCallableCallbacks(StructuralHandler):
    after_undelete = "not callable"


# =============================================================================
# Contract tests
# =============================================================================


class TestContract:
    def test_seven_callbacks(self):
        assert len(HANDLER_CALLBACKS) == 7
        assert "before_undelete" not in HANDLER_CALLBACKS

    def test_base_handler_implements_contract(self):
        assert isinstance(BaseTriggerHandler(), TriggerHandler)
        assert implements_contract(BaseTriggerHandler())

    def test_structural_handler_implements_contract(self):
        assert implements_contract(StructuralHandler())

    def test_empty_class_does_not(self):
        assert not implements_contract(NotAHandler())

    def test_partial_class_does_not(self):
        assert not implements_contract(PartialHandler())

    def test_non_callable_callback_does_not(self):
        assert not implements_contract(NonCallableCallbacks())


class TestBaseTriggerHandler:
    def test_every_callback_is_noop(self):
        handler = BaseTriggerHandler()
        records = [{"name": "A"}]
        by_id = {"1": {"name": "A"}}

        assert handler.before_insert(records) is None
        assert handler.before_update(by_id, by_id) is None
        assert handler.before_delete(by_id) is None
        assert handler.after_insert(by_id) is None
        assert handler.after_update(by_id, by_id) is None
        assert handler.after_delete(by_id) is None
        assert handler.after_undelete(by_id) is None
        assert records == [{"name": "A"}]
        assert by_id == {"1": {"name": "A"}}

    def test_subclass_overrides_subset(self):
        class StampingHandler(BaseTriggerHandler):
            def before_insert(self, new_records):
                for record in new_records:
                    record["stamped"] = True

        handler = StampingHandler()
        records = [{"name": "A"}]
        handler.before_insert(records)
        handler.after_insert({"1": records[0]})
        assert records == [{"name": "A", "stamped": True}]


# =============================================================================
# HandlerRegistry tests
# =============================================================================


class TestHandlerRegistry:
    def test_register_and_get(self):
        HandlerRegistry.register("Structural", StructuralHandler)
        assert HandlerRegistry.get("Structural") is StructuralHandler

    def test_register_same_constructor_idempotent(self):
        HandlerRegistry.register("Handler", StructuralHandler)
        HandlerRegistry.register("Handler", StructuralHandler)  # should be no-op
        assert HandlerRegistry.get("Handler") is StructuralHandler

    def test_register_different_constructor_raises(self):
        HandlerRegistry.register("Handler", StructuralHandler)
        with pytest.raises(ValueError, match="already registered"):
            HandlerRegistry.register("Handler", BaseTriggerHandler)
        assert HandlerRegistry.get("Handler") is StructuralHandler

    def test_get_unknown_raises(self):
        with pytest.raises(ValueError, match="not registered"):
            HandlerRegistry.get("NonExistent")

    def test_is_registered(self):
        assert not HandlerRegistry.is_registered("Structural")
        HandlerRegistry.register("Structural", StructuralHandler)
        assert HandlerRegistry.is_registered("Structural")

    def test_list_registered_sorted(self):
        HandlerRegistry.register("beta", StructuralHandler)
        HandlerRegistry.register("alpha", BaseTriggerHandler)
        assert HandlerRegistry.list_registered() == ["alpha", "beta"]

    def test_clear(self):
        HandlerRegistry.register("Structural", StructuralHandler)
        HandlerRegistry.clear()
        assert HandlerRegistry.list_registered() == []


class TestTriggerHandlerDecorator:
    def test_registers_under_given_name(self):
        @trigger_handler("AccountTriggerHandler")
        class AccountHandler(BaseTriggerHandler):
            pass

        assert HandlerRegistry.get("AccountTriggerHandler") is AccountHandler

    def test_same_class_name_from_two_modules_collides(self):
        @trigger_handler()
        class AccountTriggerHandler(BaseTriggerHandler):
            pass

        def other_module():
            class AccountTriggerHandler(BaseTriggerHandler):
                pass

            return AccountTriggerHandler

        with pytest.raises(ValueError, match="AccountTriggerHandler"):
            trigger_handler()(other_module())
        assert HandlerRegistry.get("AccountTriggerHandler") is AccountTriggerHandler

    def test_defaults_to_class_name(self):
        @trigger_handler()
        class ContactTriggerHandler(BaseTriggerHandler):
            pass

        assert HandlerRegistry.get("ContactTriggerHandler") is ContactTriggerHandler

    def test_registers_factory_function(self):
        shared = StructuralHandler()

        @trigger_handler("Shared")
        def make_shared():
            return shared

        assert HandlerFactory.resolve("Shared") is shared


# =============================================================================
# HandlerFactory tests
# =============================================================================


class TestHandlerFactory:
    def test_resolve_registered_name(self):
        HandlerRegistry.register("Structural", StructuralHandler)
        handler = HandlerFactory.resolve("Structural")
        assert isinstance(handler, StructuralHandler)

    def test_resolve_builds_fresh_instance(self):
        HandlerRegistry.register("Base", BaseTriggerHandler)
        assert HandlerFactory.resolve("Base") is not HandlerFactory.resolve("Base")

    def test_resolve_class_directly(self):
        handler = HandlerFactory.resolve(BaseTriggerHandler)
        assert isinstance(handler, BaseTriggerHandler)

    def test_unregistered_name_returns_none(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert HandlerFactory.resolve("Missing") is None
        assert "not registered" in caplog.text

    def test_non_handler_returns_none(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert HandlerFactory.resolve(NotAHandler) is None
        assert "NotAHandler" in caplog.text

    def test_registered_non_handler_returns_none(self):
        HandlerRegistry.register("Partial", PartialHandler)
        assert HandlerFactory.resolve("Partial") is None

    def test_non_callable_reference_returns_none(self):
        assert HandlerFactory.resolve(42) is None

    def test_constructor_errors_propagate(self):
        class Exploding(BaseTriggerHandler):
            def __init__(self):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            HandlerFactory.resolve(Exploding)

    def test_default_callbacks_are_noops(self):
        class OnlyAfterInsert(BaseTriggerHandler):
            def after_insert(self, new_by_id):
                raise AssertionError("should not be called")

        handler = HandlerFactory.resolve(OnlyAfterInsert)
        handler.before_insert([{"name": "A"}])
        handler.after_undelete({"1": {}})

    def test_display_name(self):
        assert HandlerFactory.display_name("AccountTriggerHandler") == "AccountTriggerHandler"
        assert HandlerFactory.display_name(NotAHandler) == "NotAHandler"
