"""Protocols for tracing infrastructure.

These protocols define the interface for history storage backends,
allowing different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from composekit.tracing.models import TraceRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for storing and retrieving trace records.

    Invokers and hubs call ``record`` as events happen; the store assigns
    sequence numbers and timestamps.

    Usage:
        store = InMemoryHistoryStore(max_records=100)
        invoker = Invoker(history=store)
        invoker.execute(command)
        [r.kind for r in store.records(source="invoker")]  # ["execute"]
    """

    def record(
        self, source: str, kind: str, name: str, metadata: dict[str, Any] | None = None
    ) -> TraceRecord:
        """Store one event and return the created record.

        Note:
            Implementations may be bounded. Older records are evicted first.
        """
        ...

    def records(self, source: str | None = None) -> list[TraceRecord]:
        """Stored records oldest-first, optionally filtered by source."""
        ...

    def clear(self) -> None:
        """Remove all stored records."""
        ...

    @property
    def count(self) -> int:
        """Number of records currently stored."""
        ...
