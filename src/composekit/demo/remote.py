"""Remote control driving household receivers through commands."""

from __future__ import annotations

from composekit.commands import ActionCommand, Command, Invoker, MacroCommand


class Light:
    def __init__(self, location: str) -> None:
        self.location = location
        self.is_on = False

    def on(self) -> None:
        self.is_on = True

    def off(self) -> None:
        self.is_on = False


class GarageDoor:
    def __init__(self) -> None:
        self.is_open = False

    def up(self) -> None:
        self.is_open = True

    def down(self) -> None:
        self.is_open = False


class Stereo:
    def __init__(self) -> None:
        self.volume = 0

    def louder(self, step: int) -> None:
        self.volume += step

    def quieter(self, step: int) -> None:
        self.volume -= step


class RemoteControl:
    """Slots of on/off commands sharing one invoker for undo."""

    def __init__(self, invoker: Invoker | None = None) -> None:
        self.invoker = invoker or Invoker()
        self._slots: dict[str, tuple[Command, Command]] = {}

    def set_command(self, slot: str, on: Command, off: Command) -> None:
        self._slots[slot] = (on, off)

    def on_pressed(self, slot: str) -> None:
        self.invoker.execute(self._slots[slot][0])

    def off_pressed(self, slot: str) -> None:
        self.invoker.execute(self._slots[slot][1])

    def undo_pressed(self) -> None:
        self.invoker.undo()


def light_commands(light: Light) -> tuple[ActionCommand, ActionCommand]:
    return ActionCommand(light, "on", "off"), ActionCommand(light, "off", "on")


def party_mode(*lights: Light, stereo: Stereo, volume: int = 5) -> MacroCommand:
    """All lights on and the stereo up by ``volume``."""
    steps: list[Command] = [ActionCommand(light, "on", "off") for light in lights]
    steps.append(ActionCommand(stereo, "louder", "quieter", (volume,)))
    return MacroCommand(steps, name="party")
