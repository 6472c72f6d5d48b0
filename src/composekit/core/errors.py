"""Exception hierarchy shared by all composekit modules.

Registry and chain errors are fatal to the calling operation. Undo/redo
empty-stack errors derive from NonFatalError so callers can ignore them as
a group. Subscriber failures are never raised by publish; they are collected
as SubscriberHandlerError instances on the PublishResult.
"""

from __future__ import annotations

from typing import Any


class ComposeKitError(Exception):
    """Base class for every error raised by composekit."""


class RegistryError(ComposeKitError):
    """Raised for invalid capability registry operations."""


class UnknownRoleError(RegistryError, KeyError):
    """Raised when a role (or factory kind) has no registered implementation."""

    def __init__(self, role: str) -> None:
        super().__init__(role)
        self.role = role

    def __str__(self) -> str:
        return f"No implementation registered for role '{self.role}'"


class DuplicateRoleError(RegistryError):
    """Raised by a strict registry when a role is registered twice."""

    def __init__(self, role: str) -> None:
        super().__init__(f"Role '{role}' is already registered")
        self.role = role


class ChainTooDeepError(ComposeKitError):
    """Raised when wrapping would exceed the configured chain depth."""

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(f"Wrapper chain depth {depth} exceeds limit {limit}")
        self.depth = depth
        self.limit = limit


class NonFatalError(ComposeKitError):
    """Errors the caller may safely ignore."""


class NothingToUndoError(NonFatalError):
    """Raised by Invoker.undo() when the undo stack is empty."""


class NothingToRedoError(NonFatalError):
    """Raised by Invoker.redo() when the redo stack is empty."""


class SubscriberHandlerError(ComposeKitError):
    """Wraps the failure of a single subscriber during publish.

    The original exception is available as ``error`` and as ``__cause__``.
    """

    def __init__(self, topic: str, subscriber: Any, error: BaseException) -> None:
        super().__init__(f"Subscriber {subscriber!r} failed on topic '{topic}': {error!r}")
        self.topic = topic
        self.subscriber = subscriber
        self.error = error
        self.__cause__ = error


class EmptyFactoryError(ComposeKitError, LookupError):
    """Raised when a factory is asked to create with no registered kinds."""
