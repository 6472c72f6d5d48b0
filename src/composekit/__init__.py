"""composekit: a small behavior composition engine.

Strategies live in a capability registry, decorators are wrapper chains,
commands run through an invoker with undo/redo, and observers subscribe to
topics on a notification hub.

Usage:
    from composekit import CapabilityRegistry, Invoker, NotificationHub, Wrapper

    registry = CapabilityRegistry()
    registry.register("fly", lambda: "Flying with wings")
    registry.invoke("fly")

    class Mocha(Wrapper[Beverage]):
        def cost(self):
            return self.inner.cost() + 0.20

    invoker = Invoker()
    invoker.execute(ActionCommand(light, "on", "off"))
    invoker.undo()

    hub = NotificationHub()
    hub.subscribe("weather", display)
    hub.publish("weather", measurements)
"""

__version__ = "0.1.0"

# Commands
from composekit.commands import (
    ActionCommand,
    Command,
    FunctionCommand,
    Invoker,
    MacroCommand,
)

# Configuration
from composekit.config import EngineSettings

# Core primitives
from composekit.core import (
    BehaviorSlot,
    CapabilityRegistry,
    ChainTooDeepError,
    ComposeKitError,
    DuplicateRoleError,
    EmptyFactoryError,
    HookLayer,
    HookPolicy,
    NonFatalError,
    NothingToRedoError,
    NothingToUndoError,
    SubscriberHandlerError,
    UnknownRoleError,
    Wrapper,
    build_chain,
    wrap,
)

# Engine
from composekit.engine import Engine

# Events
from composekit.events import NotificationHub, PublishResult, Subscriber

# Factories
from composekit.factory import BalancedFactory, TieBreak

# Tracing (optional)
from composekit.tracing import HistoryStore, InMemoryHistoryStore, TraceRecord

__all__ = [
    # Version
    "__version__",
    # Errors
    "ComposeKitError",
    "UnknownRoleError",
    "DuplicateRoleError",
    "ChainTooDeepError",
    "NonFatalError",
    "NothingToUndoError",
    "NothingToRedoError",
    "SubscriberHandlerError",
    "EmptyFactoryError",
    # Capability
    "CapabilityRegistry",
    "BehaviorSlot",
    # Wrapper
    "Wrapper",
    "HookLayer",
    "HookPolicy",
    "wrap",
    "build_chain",
    # Commands
    "Command",
    "ActionCommand",
    "FunctionCommand",
    "MacroCommand",
    "Invoker",
    # Events
    "NotificationHub",
    "PublishResult",
    "Subscriber",
    # Factories
    "BalancedFactory",
    "TieBreak",
    # Engine and config
    "Engine",
    "EngineSettings",
    # Tracing
    "HistoryStore",
    "InMemoryHistoryStore",
    "TraceRecord",
]
