"""Balanced factory: creates products while spreading kinds evenly.

Usage:
    factory = BalancedFactory(tie_break=TieBreak.RANDOM, seed=7)
    factory.register("dog", Dog)
    factory.register("cat", Cat)
    factory.register("duck", Duck)

    animals = [factory.create() for _ in range(6)]  # each kind exactly twice
    factory.create("cat", name="Tom")               # explicit kind, args passed on
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from composekit.core.errors import DuplicateRoleError, EmptyFactoryError, UnknownRoleError
from composekit.factory.models import TieBreak

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BalancedFactory(Generic[T]):
    """Factory whose kind-less ``create`` picks the least-used kind.

    A kind created once is not picked again until every other kind has
    been created as often. A kind registered later joins at the current
    minimum count. Ties follow the configured TieBreak.

    Args:
        tie_break: Policy among kinds with equal counts.
        seed: Seed for TieBreak.RANDOM.
    """

    def __init__(
        self,
        tie_break: TieBreak = TieBreak.REGISTRATION_ORDER,
        seed: int | None = None,
    ) -> None:
        self._tie_break = tie_break
        self._random = random.Random(seed)
        self._constructors: dict[str, Callable[..., T]] = {}
        self._counts: dict[str, int] = {}
        self._last_used: dict[str, int] = {}
        self._sequence = 0

    @property
    def tie_break(self) -> TieBreak:
        return self._tie_break

    def register(self, kind: str, constructor: Callable[..., T]) -> None:
        """Add a product kind.

        Raises:
            DuplicateRoleError: If the kind is already registered.
        """
        if kind in self._constructors:
            raise DuplicateRoleError(kind)
        self._counts[kind] = min(self._counts.values(), default=0)
        self._last_used[kind] = 0
        self._constructors[kind] = constructor

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._constructors)

    def counts(self) -> dict[str, int]:
        """Balanced-creation count per kind."""
        return dict(self._counts)

    def next_kind(self) -> str:
        """The kind the next kind-less ``create`` will build.

        Raises:
            EmptyFactoryError: If no kinds are registered.
        """
        if not self._constructors:
            raise EmptyFactoryError("No product kinds registered")

        lowest = min(self._counts.values())
        candidates = [k for k in self._constructors if self._counts[k] == lowest]
        if len(candidates) == 1 or self._tie_break is TieBreak.REGISTRATION_ORDER:
            return candidates[0]
        if self._tie_break is TieBreak.LEAST_RECENT:
            return min(candidates, key=lambda k: self._last_used[k])
        return self._random.choice(candidates)

    def create(self, kind: str | None = None, *args: Any, **kwargs: Any) -> T:
        """Build a product of ``kind``, or of the next balanced kind.

        Counts only change when the constructor returns.

        Raises:
            UnknownRoleError: If ``kind`` is not registered.
            EmptyFactoryError: If no kind is given and none are registered.
        """
        if kind is None:
            kind = self.next_kind()
        try:
            constructor = self._constructors[kind]
        except KeyError:
            raise UnknownRoleError(kind) from None

        product = constructor(*args, **kwargs)
        self._sequence += 1
        self._counts[kind] += 1
        self._last_used[kind] = self._sequence
        logger.debug("Created %s (count=%d)", kind, self._counts[kind])
        return product

    def reset(self) -> None:
        """Forget creation history; registered kinds are kept."""
        for kind in self._constructors:
            self._counts[kind] = 0
            self._last_used[kind] = 0
        self._sequence = 0
