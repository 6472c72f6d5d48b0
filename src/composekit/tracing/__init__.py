"""Tracing infrastructure for recording command and notification history.

Usage:
    from composekit.tracing import InMemoryHistoryStore

    store = InMemoryHistoryStore(max_records=1000)
    invoker = Invoker(history=store)
    hub = NotificationHub(history=store)

    for record in store.records():
        print(record.to_dict())
"""

from composekit.tracing.memory import InMemoryHistoryStore
from composekit.tracing.models import TraceRecord
from composekit.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "TraceRecord",
]
