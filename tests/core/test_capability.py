"""Tests for the capability registry.

Why these tests exist:
- Strategies must be swappable at runtime without touching callers
- Strict mode is the only thing preventing silent overwrites
- Implementation failures must reach the caller unchanged
"""

import pytest

from composekit import BehaviorSlot, CapabilityRegistry, DuplicateRoleError, UnknownRoleError
from composekit.demo.ducks import FlyNoWay, FlyWithWings


def test_register_then_invoke_swapped_strategy(registry):
    """Re-registering a role swaps the behavior seen by invoke."""
    registry.register("fly", FlyWithWings())
    assert registry.invoke("fly") == "Flying with wings"

    registry.register("fly", FlyNoWay())
    assert registry.invoke("fly") == "I can't fly"


def test_resolve_returns_current_implementation(registry):
    impl = FlyWithWings()
    registry.register("fly", impl)
    assert registry.resolve("fly") is impl


def test_resolve_unknown_role(registry):
    with pytest.raises(UnknownRoleError) as exc_info:
        registry.resolve("swim")
    assert exc_info.value.role == "swim"
    assert "swim" in str(exc_info.value)


def test_unknown_role_is_a_key_error(registry):
    """Callers using plain dict idioms can catch KeyError."""
    with pytest.raises(KeyError):
        registry.invoke("swim")


def test_strict_registry_rejects_duplicate(strict_registry):
    """CRITICAL: strict mode must not overwrite silently."""
    first = FlyWithWings()
    strict_registry.register("fly", first)

    with pytest.raises(DuplicateRoleError):
        strict_registry.register("fly", FlyNoWay())

    assert strict_registry.resolve("fly") is first


def test_replace_works_in_strict_mode(strict_registry):
    """replace is the explicit swap and is allowed even when strict."""
    first = FlyWithWings()
    strict_registry.register("fly", first)

    previous = strict_registry.replace("fly", FlyNoWay())

    assert previous is first
    assert strict_registry.invoke("fly") == "I can't fly"


def test_replace_unknown_role(registry):
    with pytest.raises(UnknownRoleError):
        registry.replace("fly", FlyNoWay())


def test_invoke_passes_arguments(registry):
    registry.register("greet", lambda name, punctuation="!": f"Hello {name}{punctuation}")
    assert registry.invoke("greet", "Mallard", punctuation="?") == "Hello Mallard?"


def test_invoke_propagates_implementation_error(registry):
    """The implementation's own exception type reaches the caller."""

    def broken():
        raise ValueError("no wings")

    registry.register("fly", broken)
    with pytest.raises(ValueError, match="no wings"):
        registry.invoke("fly")


def test_invoke_non_callable(registry):
    registry.register("fly", "not a behavior")
    with pytest.raises(TypeError):
        registry.invoke("fly")


def test_unregister(registry):
    impl = FlyWithWings()
    registry.register("fly", impl)

    assert registry.unregister("fly") is impl
    assert "fly" not in registry
    with pytest.raises(UnknownRoleError):
        registry.unregister("fly")


def test_behavior_decorator_registers_and_returns_function(registry):
    @registry.behavior("quack")
    def quack() -> str:
        return "Quack"

    assert quack() == "Quack"
    assert registry.invoke("quack") == "Quack"


def test_roles_keep_registration_order_on_overwrite(registry):
    registry.register("fly", FlyWithWings())
    registry.register("quack", lambda: "Quack")
    registry.register("fly", FlyNoWay())

    assert registry.roles() == ("fly", "quack")
    assert list(registry) == ["fly", "quack"]
    assert len(registry) == 2


def test_slots_snapshot(registry):
    impl = FlyWithWings()
    registry.register("fly", impl)

    slots = registry.slots()
    assert slots == (BehaviorSlot("fly", impl),)

    registry.register("fly", FlyNoWay())
    assert slots[0].implementation is impl, "slots() returns a snapshot"


def test_strict_property():
    assert CapabilityRegistry(strict=True).strict
    assert not CapabilityRegistry().strict
