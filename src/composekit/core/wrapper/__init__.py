"""Wrapper functionality: layers, hook layers, and chain helpers."""

from composekit.core.wrapper.chain import (
    HookLayer,
    LayerFactory,
    Wrapper,
    base_of,
    build_chain,
    chain_depth,
    iter_layers,
    wrap,
)
from composekit.core.wrapper.models import HookPolicy

__all__ = [
    # Models
    "HookPolicy",
    # Chain
    "Wrapper",
    "HookLayer",
    "LayerFactory",
    "wrap",
    "build_chain",
    "iter_layers",
    "chain_depth",
    "base_of",
]
