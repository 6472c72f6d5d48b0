"""Invoker: executes commands and keeps bounded undo/redo history.

Usage:
    invoker = Invoker(max_history=50)
    invoker.execute(ActionCommand(light, "on", "off"))
    invoker.undo()   # light.off()
    invoker.redo()   # light.on()

    try:
        invoker.undo()
    except NonFatalError:
        pass  # empty stack, nothing to do
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any

from composekit.commands.models import Command, PartialCommand, command_name
from composekit.core.errors import NothingToRedoError, NothingToUndoError

if TYPE_CHECKING:
    from composekit.tracing.protocol import HistoryStore

logger = logging.getLogger(__name__)


def _partially_applied(command: Command) -> bool:
    return isinstance(command, PartialCommand) and command.completed > 0


class Invoker:
    """Triggers commands without knowledge of their receivers.

    A successful ``execute`` pushes the command onto the undo stack and
    clears the redo stack. When the undo stack is bounded, the oldest entry
    is dropped once the bound is reached.

    A command that fails after partially applying its effect (a
    MacroCommand whose later sub-command raised) is still pushed, so
    ``undo`` reverses exactly the part that ran. The error propagates.

    Args:
        max_history: Bound on the undo stack (None for unbounded).
        history: Optional store receiving trace records.
    """

    def __init__(
        self,
        max_history: int | None = None,
        history: HistoryStore | None = None,
    ) -> None:
        if max_history is not None and max_history < 1:
            raise ValueError("max_history must be positive or None")
        self._undo: deque[Command] = deque(maxlen=max_history)
        self._redo: list[Command] = []
        self._history = history

    @property
    def max_history(self) -> int | None:
        return self._undo.maxlen

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def execute(self, command: Command) -> Any:
        """Run a command and record it for undo.

        Returns:
            Whatever the command's execute returned.
        """
        try:
            result = command.execute()
        except Exception as e:
            if _partially_applied(command):
                self._push_undo(command)
                self._redo.clear()
            self._failed("execute", command, e)
            raise

        self._push_undo(command)
        self._redo.clear()
        self._trace("execute", command)
        return result

    def undo(self) -> Command:
        """Reverse the most recent command.

        Returns:
            The command that was undone.

        Raises:
            NothingToUndoError: If the undo stack is empty.
        """
        if not self._undo:
            raise NothingToUndoError("Nothing to undo")

        command = self._undo.pop()
        try:
            command.unexecute()
        except Exception as e:
            self._undo.append(command)
            self._failed("undo", command, e)
            raise

        self._redo.append(command)
        self._trace("undo", command)
        return command

    def redo(self) -> Command:
        """Re-apply the most recently undone command.

        Returns:
            The command that was redone.

        Raises:
            NothingToRedoError: If the redo stack is empty.
        """
        if not self._redo:
            raise NothingToRedoError("Nothing to redo")

        command = self._redo.pop()
        try:
            command.execute()
        except Exception as e:
            if _partially_applied(command):
                self._push_undo(command)
            else:
                self._redo.append(command)
            self._failed("redo", command, e)
            raise

        self._push_undo(command)
        self._trace("redo", command)
        return command

    def clear(self) -> None:
        """Forget all undo and redo history. Receivers are not touched."""
        self._undo.clear()
        self._redo.clear()

    def history_names(self) -> list[str]:
        """Names of commands on the undo stack, oldest first."""
        return [command_name(c) for c in self._undo]

    def _push_undo(self, command: Command) -> None:
        if self._undo.maxlen is not None and len(self._undo) == self._undo.maxlen:
            logger.debug("Undo history full, dropping %s", command_name(self._undo[0]))
        self._undo.append(command)

    def _failed(self, operation: str, command: Command, error: Exception) -> None:
        logger.warning("%s of %s failed: %r", operation, command_name(command), error)
        metadata: dict[str, Any] = {"operation": operation, "error": repr(error)}
        if isinstance(command, PartialCommand):
            metadata["completed"] = command.completed
        self._trace("failed", command, metadata)

    def _trace(self, kind: str, command: Command, metadata: dict[str, Any] | None = None) -> None:
        if self._history is not None:
            self._history.record("invoker", kind, command_name(command), metadata)
