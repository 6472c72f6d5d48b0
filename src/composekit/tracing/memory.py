"""Bounded in-memory HistoryStore."""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Any

from composekit.tracing.models import TraceRecord


class InMemoryHistoryStore:
    """Keeps the most recent records in a deque.

    Args:
        max_records: Maximum records kept (None for unbounded).
    """

    def __init__(self, max_records: int | None = None) -> None:
        if max_records is not None and max_records < 1:
            raise ValueError("max_records must be positive or None")
        self._records: deque[TraceRecord] = deque(maxlen=max_records)
        self._sequence = 0
        self._lock = threading.Lock()

    def record(
        self, source: str, kind: str, name: str, metadata: dict[str, Any] | None = None
    ) -> TraceRecord:
        with self._lock:
            self._sequence += 1
            entry = TraceRecord(
                sequence=self._sequence,
                timestamp=time.time(),
                source=source,
                kind=kind,
                name=name,
                metadata=dict(metadata or {}),
            )
            self._records.append(entry)
        return entry

    def records(self, source: str | None = None) -> list[TraceRecord]:
        with self._lock:
            snapshot = list(self._records)
        if source is None:
            return snapshot
        return [r for r in snapshot if r.source == source]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    @property
    def count(self) -> int:
        return len(self._records)
