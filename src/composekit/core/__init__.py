"""Core functionalities: errors, the capability registry, and wrapper chains.

Architecture Note:
    core/ contains the building blocks that hold no history: a registry of
    swappable behaviors and immutable wrapper chains. For stateful services,
    see commands/ (undo/redo stacks) and events/ (subscriber lists).
"""

from composekit.core.capability import Behavior, BehaviorSlot, CapabilityRegistry
from composekit.core.errors import (
    ChainTooDeepError,
    ComposeKitError,
    DuplicateRoleError,
    EmptyFactoryError,
    NonFatalError,
    NothingToRedoError,
    NothingToUndoError,
    RegistryError,
    SubscriberHandlerError,
    UnknownRoleError,
)
from composekit.core.wrapper import (
    HookLayer,
    HookPolicy,
    LayerFactory,
    Wrapper,
    base_of,
    build_chain,
    chain_depth,
    iter_layers,
    wrap,
)

__all__ = [
    # Errors
    "ComposeKitError",
    "RegistryError",
    "UnknownRoleError",
    "DuplicateRoleError",
    "ChainTooDeepError",
    "NonFatalError",
    "NothingToUndoError",
    "NothingToRedoError",
    "SubscriberHandlerError",
    "EmptyFactoryError",
    # Capability
    "Behavior",
    "BehaviorSlot",
    "CapabilityRegistry",
    # Wrapper
    "Wrapper",
    "HookLayer",
    "HookPolicy",
    "LayerFactory",
    "wrap",
    "build_chain",
    "iter_layers",
    "chain_depth",
    "base_of",
]
