"""Tests for the HistoryStore protocol and the in-memory store.

Why these tests exist:
- Invokers and hubs accept any HistoryStore; compliance must be checkable
- The bounded store must evict oldest records first
"""

import pytest

from composekit.tracing import HistoryStore, InMemoryHistoryStore, TraceRecord


class ListHistoryStore:
    """Minimal HistoryStore implementation for testing."""

    def __init__(self) -> None:
        self._records: list[TraceRecord] = []

    def record(self, source, kind, name, metadata=None) -> TraceRecord:
        entry = TraceRecord(len(self._records) + 1, 0.0, source, kind, name, metadata or {})
        self._records.append(entry)
        return entry

    def records(self, source=None) -> list[TraceRecord]:
        return [r for r in self._records if source is None or r.source == source]

    def clear(self) -> None:
        self._records.clear()

    @property
    def count(self) -> int:
        return len(self._records)


def test_implementations_satisfy_protocol() -> None:
    assert isinstance(ListHistoryStore(), HistoryStore)
    assert isinstance(InMemoryHistoryStore(), HistoryStore)


def test_custom_store_receives_invoker_events(counter) -> None:
    from composekit import ActionCommand, Invoker

    store = ListHistoryStore()
    invoker = Invoker(history=store)
    invoker.execute(ActionCommand(counter, "increment", "decrement"))

    assert [r.kind for r in store.records()] == ["execute"]


def test_sequence_numbers_increase() -> None:
    store = InMemoryHistoryStore()
    first = store.record("hub", "publish", "a")
    second = store.record("invoker", "execute", "b")

    assert second.sequence == first.sequence + 1
    assert second.timestamp >= first.timestamp


def test_filter_by_source() -> None:
    store = InMemoryHistoryStore()
    store.record("hub", "publish", "a")
    store.record("invoker", "execute", "b")

    assert [r.name for r in store.records(source="hub")] == ["a"]
    assert [r.name for r in store.records()] == ["a", "b"]


def test_bounded_store_evicts_oldest() -> None:
    store = InMemoryHistoryStore(max_records=2)
    for name in ("a", "b", "c"):
        store.record("hub", "publish", name)

    assert store.count == 2
    assert [r.name for r in store.records()] == ["b", "c"]


def test_metadata_is_copied() -> None:
    store = InMemoryHistoryStore()
    metadata = {"n": 1}
    record = store.record("hub", "publish", "a", metadata)
    metadata["n"] = 2
    assert record.metadata == {"n": 1}


def test_clear() -> None:
    store = InMemoryHistoryStore()
    store.record("hub", "publish", "a")
    store.clear()
    assert store.count == 0
    assert store.records() == []


def test_invalid_bound() -> None:
    with pytest.raises(ValueError):
        InMemoryHistoryStore(max_records=0)
