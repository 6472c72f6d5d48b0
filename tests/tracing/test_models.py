"""Tests for tracing data models.

Why these tests exist:
- TraceRecord is the unit stored by every HistoryStore
- Serialization must preserve all data and omit empty metadata
"""

import dataclasses

import pytest

from composekit.tracing import TraceRecord


@pytest.mark.parametrize(
    ("kwargs", "has_metadata"),
    [
        (
            {
                "sequence": 1,
                "timestamp": 1704067200.0,
                "source": "invoker",
                "kind": "execute",
                "name": "Light.on",
            },
            False,
        ),
        (
            {
                "sequence": 2,
                "timestamp": 1704067300.0,
                "source": "hub",
                "kind": "publish",
                "name": "weather",
                "metadata": {"delivered": 2, "failed": 0},
            },
            True,
        ),
    ],
    ids=["minimal", "full"],
)
def test_to_dict_from_dict(kwargs, has_metadata) -> None:
    """to_dict omits empty metadata and from_dict restores the record."""
    record = TraceRecord(**kwargs)
    data = record.to_dict()

    assert ("metadata" in data) == has_metadata
    assert TraceRecord.from_dict(data) == record


def test_record_is_frozen() -> None:
    record = TraceRecord(sequence=1, timestamp=0.0, source="hub", kind="publish", name="t")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.kind = "other"


def test_to_dict_copies_metadata() -> None:
    """Mutating the serialized dict does not alter the stored record."""
    record = TraceRecord(
        sequence=1, timestamp=0.0, source="hub", kind="publish", name="t", metadata={"n": 1}
    )
    record.to_dict()["metadata"]["n"] = 99
    assert record.metadata == {"n": 1}
