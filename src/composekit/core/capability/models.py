"""Capability models: behavior slots and the behavior protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Behavior(Protocol):
    """An interchangeable behavior implementation (a strategy).

    Any callable qualifies; classes implementing ``__call__`` are the usual
    form when the behavior carries configuration.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Any: ...


@dataclass(slots=True, frozen=True)
class BehaviorSlot:
    """A (role, implementation) pair as held by a registry."""

    role: str
    implementation: Any
