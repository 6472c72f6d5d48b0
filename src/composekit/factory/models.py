"""Factory models."""

from __future__ import annotations

from enum import Enum, auto


class TieBreak(Enum):
    """How BalancedFactory picks among kinds created equally often."""

    REGISTRATION_ORDER = auto()  # Earliest registered kind wins
    LEAST_RECENT = auto()  # Kind created longest ago (never created first)
    RANDOM = auto()  # Uniform choice from the factory's seeded Random
