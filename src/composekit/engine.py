"""Engine: composition root building each service once from settings.

Usage:
    engine = Engine.from_settings(EngineSettings(strict_roles=True, trace=True))

    engine.capabilities.register("fly", FlyWithWings())
    engine.invoker.execute(ActionCommand(light, "on", "off"))
    engine.hub.publish("light", "on")

    drink = engine.wrap(Espresso(), Mocha)
    engine.history.records() if engine.history else []

The engine is constructed once by the application and passed to whatever
needs it. Nothing in composekit keeps process-wide instances.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from composekit.commands import Invoker
from composekit.config import EngineSettings
from composekit.core.capability import CapabilityRegistry
from composekit.core.wrapper import Wrapper, build_chain
from composekit.events import NotificationHub
from composekit.tracing import InMemoryHistoryStore

logger = logging.getLogger(__name__)


@dataclass
class Engine:
    """Holds one registry, one invoker and one hub sharing one configuration."""

    settings: EngineSettings = field(default_factory=EngineSettings)
    capabilities: CapabilityRegistry = field(init=False)
    invoker: Invoker = field(init=False)
    hub: NotificationHub = field(init=False)
    history: InMemoryHistoryStore | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        s = self.settings
        if s.trace:
            self.history = InMemoryHistoryStore(max_records=s.trace_max_records)
        self.capabilities = CapabilityRegistry(strict=s.strict_roles)
        self.invoker = Invoker(max_history=s.max_undo_history, history=self.history)
        self.hub = NotificationHub(weak=s.weak_subscribers, history=self.history)
        logger.debug("Engine created with %r", s)

    @classmethod
    def from_settings(cls, settings: EngineSettings | None = None, **overrides: Any) -> Engine:
        """Build an engine from settings, environment, and keyword overrides."""
        if settings is None:
            settings = EngineSettings(**overrides)
        elif overrides:
            settings = type(settings).model_validate({**settings.model_dump(), **overrides})
        return cls(settings=settings)

    def wrap(
        self, component: Any, layer_cls: Callable[..., Wrapper[Any]], *args: Any, **kwargs: Any
    ) -> Wrapper[Any]:
        """Wrap ``component`` with the engine's chain depth limit."""
        kwargs.setdefault("max_depth", self.settings.max_chain_depth)
        return layer_cls(component, *args, **kwargs)

    def build_chain(self, base: Any, *layer_classes: Callable[..., Wrapper[Any]]) -> Any:
        """Stack ``layer_classes`` on ``base`` innermost-first with the depth limit."""
        limit = self.settings.max_chain_depth
        return build_chain(base, *(_bind_depth(cls, limit) for cls in layer_classes))


def _bind_depth(layer_cls: Callable[..., Wrapper[Any]], limit: int) -> Callable[[Any], Any]:
    def layer(inner: Any) -> Any:
        return layer_cls(inner, max_depth=limit)

    return layer
