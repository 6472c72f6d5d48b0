"""Data models for tracing.

Records are JSON-serializable so any store can persist them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class TraceRecord:
    """One traced event from an invoker or a notification hub.

    Attributes:
        sequence: Monotonic number assigned by the store.
        timestamp: Unix timestamp when the event occurred.
        source: Emitting component ("invoker", "hub", ...).
        kind: Event kind ("execute", "undo", "redo", "failed", "publish").
        name: Command name or topic.
        metadata: Optional extra data (counts, error text).

    Example:
        record = TraceRecord(
            sequence=3,
            timestamp=1704067200.0,
            source="hub",
            kind="publish",
            name="weather",
            metadata={"delivered": 2, "failed": 0},
        )
    """

    sequence: int
    timestamp: float
    source: str
    kind: str
    name: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "sequence": self.sequence,
            "timestamp": self.timestamp,
            "source": self.source,
            "kind": self.kind,
            "name": self.name,
        }
        if self.metadata:
            result["metadata"] = dict(self.metadata)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TraceRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            sequence=data["sequence"],
            timestamp=data["timestamp"],
            source=data["source"],
            kind=data["kind"],
            name=data["name"],
            metadata=data.get("metadata", {}),
        )
