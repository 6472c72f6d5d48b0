"""Ducks whose fly and quack behaviors are swappable strategies."""

from __future__ import annotations

from typing import Any

from composekit.core.capability import CapabilityRegistry


class FlyWithWings:
    def __call__(self) -> str:
        return "Flying with wings"


class FlyNoWay:
    def __call__(self) -> str:
        return "I can't fly"


class FlyRocketPowered:
    def __call__(self) -> str:
        return "Flying with a rocket"


class Quack:
    def __call__(self) -> str:
        return "Quack"


class Squeak:
    def __call__(self) -> str:
        return "Squeak"


class MuteQuack:
    def __call__(self) -> str:
        return "<< Silence >>"


class Duck:
    """Owns a capability registry with "fly" and "quack" roles."""

    name = "Duck"

    def __init__(self, fly: Any, quack: Any, strict: bool = False) -> None:
        self.behaviors = CapabilityRegistry(strict=strict)
        self.behaviors.register("fly", fly)
        self.behaviors.register("quack", quack)

    def perform_fly(self) -> str:
        return self.behaviors.invoke("fly")

    def perform_quack(self) -> str:
        return self.behaviors.invoke("quack")

    def set_fly_behavior(self, fly: Any) -> None:
        self.behaviors.replace("fly", fly)

    def set_quack_behavior(self, quack: Any) -> None:
        self.behaviors.replace("quack", quack)


class MallardDuck(Duck):
    name = "Mallard"

    def __init__(self, strict: bool = False) -> None:
        super().__init__(FlyWithWings(), Quack(), strict=strict)


class RubberDuck(Duck):
    name = "Rubber duck"

    def __init__(self, strict: bool = False) -> None:
        super().__init__(FlyNoWay(), Squeak(), strict=strict)


class ModelDuck(Duck):
    name = "Model duck"

    def __init__(self, strict: bool = False) -> None:
        super().__init__(FlyNoWay(), MuteQuack(), strict=strict)
