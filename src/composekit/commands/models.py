"""Command models: the command protocol and concrete commands.

Usage:
    light = Light()
    on = ActionCommand(light, "on", "off")
    on.execute()    # light.on()
    on.unexecute()  # light.off()

    party = MacroCommand([ActionCommand(light, "on", "off"), ActionCommand(stereo, "on", "off")])
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Command(Protocol):
    """A reified action supporting execute and its exact inverse."""

    def execute(self) -> Any: ...

    def unexecute(self) -> Any: ...


@runtime_checkable
class PartialCommand(Protocol):
    """A command that reports how much of its effect was applied."""

    @property
    def completed(self) -> int: ...


def command_name(command: Any) -> str:
    """Display name of a command: its ``name`` attribute or its class name."""
    name = getattr(command, "name", None)
    return name if isinstance(name, str) and name else type(command).__name__


@dataclass(slots=True, frozen=True)
class ActionCommand:
    """Immutable pairing of a receiver with an action and its inverse.

    Attributes:
        receiver: Object the command acts on.
        action: Method name called by execute.
        inverse: Method name called by unexecute.
        args: Positional arguments passed to both methods.
    """

    receiver: Any
    action: str
    inverse: str
    args: tuple[Any, ...] = ()

    @property
    def name(self) -> str:
        return f"{type(self.receiver).__name__}.{self.action}"

    def execute(self) -> Any:
        return getattr(self.receiver, self.action)(*self.args)

    def unexecute(self) -> Any:
        return getattr(self.receiver, self.inverse)(*self.args)


@dataclass(slots=True, frozen=True)
class FunctionCommand:
    """Command built from two zero-argument callables."""

    do: Callable[[], Any]
    undo: Callable[[], Any]
    label: str | None = None

    @property
    def name(self) -> str:
        return self.label or getattr(self.do, "__name__", "FunctionCommand")

    def execute(self) -> Any:
        return self.do()

    def unexecute(self) -> Any:
        return self.undo()


class MacroCommand:
    """Ordered sequence of commands executed as one.

    Each ``execute`` records how many sub-commands it applied, so the same
    macro can sit on an undo stack several times and each ``unexecute``
    reverses the most recent application still in effect. If a sub-command
    fails, the count stops at the prefix that ran and the error propagates.
    A failing sub-command that itself reports partial progress (a nested
    macro) counts as applied, so its own prefix is reversed too.

    Args:
        commands: Sub-commands in execution order.
        name: Optional display name.
    """

    def __init__(self, commands: Iterable[Command], name: str | None = None) -> None:
        self._commands: tuple[Command, ...] = tuple(commands)
        self._applied: list[int] = []
        self.name = name or "macro"

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    @property
    def completed(self) -> int:
        """Sub-commands applied by the most recent execution still in effect."""
        return self._applied[-1] if self._applied else 0

    def execute(self) -> None:
        self._discard_empty()
        self._applied.append(0)
        for command in self._commands:
            try:
                command.execute()
            except Exception:
                if isinstance(command, PartialCommand) and command.completed > 0:
                    self._applied[-1] += 1
                raise
            self._applied[-1] += 1

    def unexecute(self) -> None:
        self._discard_empty()
        if not self._applied:
            return
        # The count equals the applied prefix, even if an inverse raises.
        while self._applied[-1]:
            self._commands[self._applied[-1] - 1].unexecute()
            self._applied[-1] -= 1
        self._applied.pop()

    def _discard_empty(self) -> None:
        # A failed execute that applied nothing leaves a zero count on top.
        while self._applied and not self._applied[-1]:
            self._applied.pop()

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return (
            f"MacroCommand({self.name!r}, {len(self._commands)} commands, "
            f"completed={self.completed})"
        )
