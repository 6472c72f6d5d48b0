"""Commands: reified actions with undo, and the invoker that runs them."""

from composekit.commands.invoker import Invoker
from composekit.commands.models import (
    ActionCommand,
    Command,
    FunctionCommand,
    MacroCommand,
    PartialCommand,
    command_name,
)

__all__ = [
    # Protocols
    "Command",
    "PartialCommand",
    # Commands
    "ActionCommand",
    "FunctionCommand",
    "MacroCommand",
    "command_name",
    # Invoker
    "Invoker",
]
