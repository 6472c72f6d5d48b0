"""Capability functionality: behavior slots and the role registry."""

from composekit.core.capability.core import CapabilityRegistry
from composekit.core.capability.models import Behavior, BehaviorSlot

__all__ = [
    # Models
    "Behavior",
    "BehaviorSlot",
    # Core
    "CapabilityRegistry",
]
