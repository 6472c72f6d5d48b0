"""Capability registry: named behaviors keyed by role.

Usage:
    registry = CapabilityRegistry()
    registry.register("fly", FlyWithWings())
    registry.invoke("fly")  # "Flying with wings"

    # Swap the strategy at runtime
    registry.register("fly", FlyNoWay())
    registry.invoke("fly")  # "I can't fly"

    # Decorator form
    @registry.behavior("quack")
    def quack() -> str:
        return "Quack"
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from composekit.core.capability.models import BehaviorSlot
from composekit.core.errors import DuplicateRoleError, UnknownRoleError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class CapabilityRegistry:
    """Holds one implementation per role for a single owning entity.

    Role names are unique within the registry. In strict mode ``register``
    refuses to overwrite an existing role; ``replace`` is the explicit swap.
    Insertion order of roles is preserved; overwriting keeps the original
    position.

    Args:
        strict: If True, re-registering a role raises DuplicateRoleError.
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict
        self._slots: dict[str, Any] = {}

    @property
    def strict(self) -> bool:
        """Whether duplicate registration is rejected."""
        return self._strict

    def register(self, role: str, implementation: Any) -> None:
        """Store the implementation for a role.

        Args:
            role: Role name, e.g. "fly".
            implementation: Behavior to use for the role.

        Raises:
            DuplicateRoleError: If strict and the role is already registered.
        """
        if role in self._slots:
            if self._strict:
                raise DuplicateRoleError(role)
            logger.debug("Overwriting role %r with %r", role, implementation)
        self._slots[role] = implementation

    def replace(self, role: str, implementation: Any) -> Any:
        """Swap the implementation of an existing role, even in strict mode.

        Returns:
            The previous implementation.

        Raises:
            UnknownRoleError: If the role is not registered.
        """
        previous = self.resolve(role)
        self._slots[role] = implementation
        logger.debug("Replaced role %r: %r -> %r", role, previous, implementation)
        return previous

    def unregister(self, role: str) -> Any:
        """Remove a role and return its implementation.

        Raises:
            UnknownRoleError: If the role is not registered.
        """
        try:
            return self._slots.pop(role)
        except KeyError:
            raise UnknownRoleError(role) from None

    def resolve(self, role: str) -> Any:
        """Return the current implementation for a role.

        Raises:
            UnknownRoleError: If the role is not registered.
        """
        try:
            return self._slots[role]
        except KeyError:
            raise UnknownRoleError(role) from None

    def invoke(self, role: str, *args: Any, **kwargs: Any) -> Any:
        """Resolve a role and call its implementation.

        Exceptions raised by the implementation propagate unchanged.

        Raises:
            UnknownRoleError: If the role is not registered.
            TypeError: If the implementation is not callable.
        """
        implementation = self.resolve(role)
        if not callable(implementation):
            raise TypeError(
                f"Implementation for role '{role}' is not callable: {implementation!r}"
            )
        return implementation(*args, **kwargs)

    def behavior(self, role: str) -> Callable[[F], F]:
        """Decorator registering a callable under ``role``.

        Returns the decorated callable unchanged.
        """

        def decorator(fn: F) -> F:
            self.register(role, fn)
            return fn

        return decorator

    def roles(self) -> tuple[str, ...]:
        """Registered role names in registration order."""
        return tuple(self._slots)

    def slots(self) -> tuple[BehaviorSlot, ...]:
        """Current configuration as BehaviorSlot pairs."""
        return tuple(BehaviorSlot(role, impl) for role, impl in self._slots.items())

    def __contains__(self, role: object) -> bool:
        return role in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)
