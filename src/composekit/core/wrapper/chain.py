"""Composable wrapper chains (decorators by composition).

Usage:
    class Mocha(Wrapper[Beverage]):
        def cost(self) -> float:
            return self.inner.cost() + 0.20

    drink = build_chain(Espresso(), Mocha, Whip)
    drink.cost()          # 1.99 + 0.20 + 0.10
    drink.description()   # forwarded unless a layer overrides it

    # Generic single-operation layer
    taxed = HookLayer(drink, "cost", after=lambda total: round(total * 1.2, 2))
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from composekit.config.settings import DEFAULT_MAX_CHAIN_DEPTH
from composekit.core.errors import ChainTooDeepError
from composekit.core.wrapper.models import HookPolicy

T = TypeVar("T")

_MISSING = object()


def _defines(node: Any, name: str) -> bool:
    """True if ``name`` is an instance attribute or declared on the node's class."""
    if name in getattr(node, "__dict__", {}):
        return True
    return any(name in vars(klass) for klass in type(node).__mro__)


class Wrapper(Generic[T]):
    """Base class for a layer holding exactly one inner component.

    Attributes the layer does not define are looked up on the inner
    component, so a layer only overrides the operations it augments. Names
    starting with an underscore are never forwarded. Forwarding walks the
    chain in a loop and stops at the first layer that defines the name, so
    it costs no stack frames per layer. An ``AttributeError`` raised inside
    a layer's own property propagates instead of falling through to inner.

    An augmented operation that calls ``self.inner`` adds one frame per
    layer. A chain at the default limit leaves no headroom under CPython's
    default recursion limit, so such layers should loop over ``iter_layers``
    (see ``Condiment``) or the chain should use a lower ``max_depth``.

    The inner reference is fixed at construction. Chains cannot be edited;
    build a new chain instead.

    Args:
        inner: Component or wrapper to wrap.
        max_depth: Maximum chain depth including this layer.

    Raises:
        ChainTooDeepError: If this layer would exceed max_depth.
    """

    __slots__ = ("_inner", "_depth")

    def __init__(self, inner: T, *, max_depth: int | None = None) -> None:
        limit = DEFAULT_MAX_CHAIN_DEPTH if max_depth is None else max_depth
        depth = inner._depth + 1 if isinstance(inner, Wrapper) else 1
        if depth > limit:
            raise ChainTooDeepError(depth, limit)
        self._inner = inner
        self._depth = depth

    @property
    def inner(self) -> T:
        """The directly wrapped component."""
        return self._inner

    @property
    def depth(self) -> int:
        """Number of wrapper layers from the base up to and including this one."""
        return self._depth

    @property
    def base(self) -> Any:
        """The terminal concrete component of the chain."""
        return base_of(self)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        node: Any = self
        while isinstance(node, Wrapper):
            found = node._own_attribute(name)
            if found is not _MISSING:
                return found
            node = node._inner
        return getattr(node, name)

    def _own_attribute(self, name: str) -> Any:
        """Return ``name`` as defined by this layer itself, or _MISSING."""
        if _defines(self, name):
            # Re-run normal lookup so the layer's own error surfaces.
            return object.__getattribute__(self, name)
        return _MISSING

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class HookLayer(Wrapper[T]):
    """Layer augmenting one named operation with a single hook.

    Exactly one of ``before``, ``after`` or ``around`` must be given:
        before(*args, **kwargs): runs first, inner result is returned.
        after(result, *args, **kwargs): its return value replaces the result.
        around(call_inner, *args, **kwargs): decides whether and how to call inner.

    Raises:
        ValueError: If not exactly one hook is given.
        TypeError: If the inner component has no callable ``operation``.
    """

    __slots__ = ("_operation", "_policy", "_hook")

    def __init__(
        self,
        inner: T,
        operation: str,
        *,
        before: Callable[..., Any] | None = None,
        after: Callable[..., Any] | None = None,
        around: Callable[..., Any] | None = None,
        max_depth: int | None = None,
    ) -> None:
        hooks = [
            (policy, hook)
            for policy, hook in (
                (HookPolicy.BEFORE, before),
                (HookPolicy.AFTER, after),
                (HookPolicy.AROUND, around),
            )
            if hook is not None
        ]
        if len(hooks) != 1:
            raise ValueError("HookLayer takes exactly one of before, after or around")
        if not callable(getattr(inner, operation, None)):
            raise TypeError(f"{type(inner).__name__} has no callable operation '{operation}'")

        super().__init__(inner, max_depth=max_depth)
        self._operation = operation
        self._policy, self._hook = hooks[0]

    @property
    def operation(self) -> str:
        """Name of the augmented operation."""
        return self._operation

    @property
    def policy(self) -> HookPolicy:
        """Where the hook runs relative to the inner call."""
        return self._policy

    def _own_attribute(self, name: str) -> Any:
        if name == self._operation:
            return self._call
        return super()._own_attribute(name)

    def _call(self, *args: Any, **kwargs: Any) -> Any:
        target = getattr(self._inner, self._operation)
        if self._policy is HookPolicy.AROUND:
            return self._hook(target, *args, **kwargs)
        if self._policy is HookPolicy.BEFORE:
            self._hook(*args, **kwargs)
            return target(*args, **kwargs)
        result = target(*args, **kwargs)
        return self._hook(result, *args, **kwargs)

    def __repr__(self) -> str:
        return f"HookLayer({self._inner!r}, {self._operation!r}, {self._policy.name.lower()})"


LayerFactory = Callable[[Any], Any]
"""Callable taking the inner node and returning the new outer node."""


def wrap(
    component: T, layer_cls: Callable[..., Wrapper[T]], *args: Any, **kwargs: Any
) -> Wrapper[T]:
    """Return a new layer of ``layer_cls`` around ``component``."""
    return layer_cls(component, *args, **kwargs)


def build_chain(base: Any, *layers: LayerFactory) -> Any:
    """Apply layer factories innermost-first and return the outermost node.

    Args:
        base: Concrete component at the bottom of the chain.
        *layers: Wrapper classes or callables taking the inner node.

    Returns:
        Outermost node (``base`` itself when no layers are given).
    """
    node = base
    for layer in layers:
        node = layer(node)
    return node


def iter_layers(node: Any) -> Iterator[Wrapper[Any]]:
    """Yield wrapper layers outermost-first, stopping before the base."""
    while isinstance(node, Wrapper):
        yield node
        node = node._inner


def chain_depth(node: Any) -> int:
    """Number of wrapper layers above the base (0 for a bare component)."""
    return node._depth if isinstance(node, Wrapper) else 0


def base_of(node: Any) -> Any:
    """Return the terminal concrete component of a chain."""
    while isinstance(node, Wrapper):
        node = node._inner
    return node
