"""Events: topic-based notification hub with failure isolation."""

from composekit.events.hub import NotificationHub
from composekit.events.models import PublishResult, StrongRef, Subscriber, Topic

__all__ = [
    "NotificationHub",
    "PublishResult",
    "StrongRef",
    "Subscriber",
    "Topic",
]
