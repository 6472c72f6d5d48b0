"""Notification models: subscriber protocol, topics, and publish results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from composekit.core.errors import SubscriberHandlerError


@runtime_checkable
class Subscriber(Protocol):
    """An observer receiving notifications from a hub.

    Plain callables taking ``(topic, payload)`` are accepted as well.
    """

    def notify(self, topic: str, payload: Any) -> None: ...


SubscriberRef = Callable[[], Any]
"""Zero-argument callable returning the subscriber, or None once collected."""


class StrongRef:
    """Reference with the ``weakref.ref`` call interface that keeps its target alive."""

    __slots__ = ("_target",)

    def __init__(self, target: Any) -> None:
        self._target = target

    def __call__(self) -> Any:
        return self._target

    def __repr__(self) -> str:
        return f"StrongRef({self._target!r})"


@dataclass(slots=True)
class Topic:
    """A named channel and its subscriber references in notification order."""

    name: str
    refs: list[SubscriberRef] = field(default_factory=list)

    def live(self) -> list[Any]:
        """Dereference all entries, dropping collected ones from the topic."""
        alive: list[SubscriberRef] = []
        targets: list[Any] = []
        for ref in self.refs:
            target = ref()
            if target is not None:
                alive.append(ref)
                targets.append(target)
        self.refs = alive
        return targets


@dataclass(slots=True)
class PublishResult:
    """Outcome of one publish call.

    Attributes:
        topic: Topic that was published to.
        delivered: Subscribers whose handler returned normally.
        failures: One SubscriberHandlerError per failing subscriber, in order.
    """

    topic: str
    delivered: int = 0
    failures: list[SubscriberHandlerError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def notified(self) -> int:
        """Number of subscribers called, successful or not."""
        return self.delivered + len(self.failures)

    def raise_for_failures(self) -> None:
        """Raise an ExceptionGroup of all subscriber failures, if any."""
        if self.failures:
            raise ExceptionGroup(
                f"{len(self.failures)} subscriber(s) failed on topic '{self.topic}'",
                list(self.failures),
            )
