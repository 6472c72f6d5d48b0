"""Factories: balanced product creation with a configurable tie-break."""

from composekit.factory.balanced import BalancedFactory
from composekit.factory.models import TieBreak

__all__ = [
    "BalancedFactory",
    "TieBreak",
]
