"""Notification hub: per-topic subscriber lists with synchronous dispatch.

Usage:
    hub = NotificationHub()
    display = CurrentConditionsDisplay()
    hub.subscribe("weather", display)        # calls display.notify(topic, payload)
    hub.subscribe("weather", on_weather)     # or any (topic, payload) callable

    result = hub.publish("weather", Measurements(80, 65, 30.4))
    if not result.ok:
        result.raise_for_failures()

Subscribers are held by weak reference unless ``weak=False``; a collected
subscriber is silently dropped. Pass ``weak=False`` for lambdas and other
callables nothing else keeps alive.
"""

from __future__ import annotations

import inspect
import logging
import threading
import weakref
from typing import TYPE_CHECKING, Any

from composekit.core.errors import SubscriberHandlerError
from composekit.events.models import PublishResult, StrongRef, Subscriber, SubscriberRef, Topic

if TYPE_CHECKING:
    from composekit.tracing.protocol import HistoryStore

logger = logging.getLogger(__name__)


def _make_ref(subscriber: Any, weak: bool) -> SubscriberRef:
    if not weak:
        return StrongRef(subscriber)
    if inspect.ismethod(subscriber):
        return weakref.WeakMethod(subscriber)
    try:
        return weakref.ref(subscriber)
    except TypeError:
        # Builtins and slotted objects without __weakref__
        return StrongRef(subscriber)


def _same_subscriber(target: Any, subscriber: Any) -> bool:
    if target is subscriber:
        return True
    # Bound methods are recreated on every attribute access
    return inspect.ismethod(subscriber) and target == subscriber


def _deliver(target: Any, topic: str, payload: Any) -> None:
    if isinstance(target, Subscriber):
        target.notify(topic, payload)
    else:
        target(topic, payload)


class NotificationHub:
    """Maintains ordered subscriber lists per topic.

    The lock guards list mutation and the snapshot taken at publish time.
    Handlers run without the lock, so a handler may subscribe or unsubscribe
    without deadlocking; such changes apply from the next publish on.

    Args:
        weak: Default reference mode for subscribe.
        history: Optional store receiving a trace record per publish.
    """

    def __init__(self, weak: bool = True, history: HistoryStore | None = None) -> None:
        self._weak = weak
        self._topics: dict[str, Topic] = {}
        self._lock = threading.Lock()
        self._history = history

    def subscribe(self, topic: str, subscriber: Any, *, weak: bool | None = None) -> bool:
        """Append a subscriber to a topic unless already present.

        Args:
            topic: Topic name.
            subscriber: Object with ``notify(topic, payload)`` or a callable.
            weak: Override the hub's default reference mode.

        Returns:
            True if added, False if it was already subscribed.

        Raises:
            TypeError: If the subscriber is neither a Subscriber nor callable.
        """
        if not (isinstance(subscriber, Subscriber) or callable(subscriber)):
            raise TypeError(f"Subscriber must implement notify() or be callable: {subscriber!r}")

        ref = _make_ref(subscriber, self._weak if weak is None else weak)
        with self._lock:
            entry = self._topics.get(topic)
            if entry is None:
                entry = self._topics[topic] = Topic(topic)
            if any(_same_subscriber(t, subscriber) for t in entry.live()):
                return False
            entry.refs.append(ref)
        logger.debug("Subscribed %r to %r", subscriber, topic)
        return True

    def unsubscribe(self, topic: str, subscriber: Any) -> bool:
        """Remove a subscriber from a topic. No-op if absent.

        Returns:
            True if the subscriber was removed.
        """
        with self._lock:
            entry = self._topics.get(topic)
            if entry is None:
                return False
            for index, ref in enumerate(entry.refs):
                target = ref()
                if target is not None and _same_subscriber(target, subscriber):
                    del entry.refs[index]
                    logger.debug("Unsubscribed %r from %r", subscriber, topic)
                    return True
        return False

    def publish(self, topic: str, payload: Any = None) -> PublishResult:
        """Notify every current subscriber of ``topic`` in registration order.

        Failing handlers are caught and collected on the result; delivery to
        the remaining subscribers continues. Never raises for handler errors.
        """
        with self._lock:
            entry = self._topics.get(topic)
            snapshot = entry.live() if entry is not None else []

        result = PublishResult(topic=topic)
        for target in snapshot:
            try:
                _deliver(target, topic, payload)
            except Exception as e:
                logger.warning("Subscriber %r failed on topic %r", target, topic, exc_info=True)
                result.failures.append(SubscriberHandlerError(topic, target, e))
            else:
                result.delivered += 1

        if self._history is not None:
            self._history.record(
                "hub",
                "publish",
                topic,
                {"delivered": result.delivered, "failed": len(result.failures)},
            )
        return result

    def subscribers(self, topic: str) -> list[Any]:
        """Live subscribers of a topic in notification order."""
        with self._lock:
            entry = self._topics.get(topic)
            return entry.live() if entry is not None else []

    def subscriber_count(self, topic: str) -> int:
        return len(self.subscribers(topic))

    def topics(self) -> list[str]:
        """Topics that have at least one live subscriber."""
        with self._lock:
            return [name for name, entry in self._topics.items() if entry.live()]

    def clear(self, topic: str | None = None) -> None:
        """Drop all subscribers of one topic, or of every topic."""
        with self._lock:
            if topic is None:
                self._topics.clear()
            else:
                self._topics.pop(topic, None)
