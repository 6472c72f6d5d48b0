"""Wrapper chain models."""

from __future__ import annotations

from enum import Enum, auto


class HookPolicy(Enum):
    """Where a HookLayer runs its augmentation relative to the inner call."""

    BEFORE = auto()  # Hook runs, then inner
    AFTER = auto()  # Inner runs, hook sees and may replace the result
    AROUND = auto()  # Hook receives the inner operation and decides
