"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from composekit import CapabilityRegistry, InMemoryHistoryStore, Invoker, NotificationHub


class Counter:
    """Receiver with an observable value and exact inverses."""

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def increment(self, step: int = 1) -> None:
        self.value += step

    def decrement(self, step: int = 1) -> None:
        self.value -= step

    def explode(self, *_args) -> None:
        raise RuntimeError("boom")


class Recorder:
    """Subscriber recording every notification it receives."""

    def __init__(self, name: str = "recorder") -> None:
        self.name = name
        self.received: list[tuple[str, object]] = []

    def notify(self, topic: str, payload: object) -> None:
        self.received.append((topic, payload))


@pytest.fixture
def registry():
    """Fresh non-strict CapabilityRegistry."""
    return CapabilityRegistry()


@pytest.fixture
def strict_registry():
    return CapabilityRegistry(strict=True)


@pytest.fixture
def store():
    return InMemoryHistoryStore()


@pytest.fixture
def invoker(store):
    """Invoker tracing into the shared store."""
    return Invoker(history=store)


@pytest.fixture
def hub():
    return NotificationHub()


@pytest.fixture
def counter():
    return Counter()


@pytest.fixture
def counter_cls():
    return Counter


@pytest.fixture
def recorder_cls():
    return Recorder
