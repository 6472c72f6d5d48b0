"""Fixed demonstration scenario exercising every building block."""

from __future__ import annotations

from composekit.demo.beverages import DarkRoast, Espresso, Mocha, Whip
from composekit.demo.ducks import FlyRocketPowered, MallardDuck, ModelDuck
from composekit.demo.remote import Light, RemoteControl, light_commands
from composekit.demo.weather import CurrentConditionsDisplay, StatisticsDisplay, WeatherData
from composekit.engine import Engine


def run_demo(engine: Engine, headings: bool = True) -> list[str]:
    """Run the scenario against ``engine`` and return the printed lines."""
    lines: list[str] = []

    def section(title: str) -> None:
        if headings:
            lines.append(f"== {title}")

    strict = engine.settings.strict_roles

    section("Strategy")
    mallard = MallardDuck(strict=strict)
    lines.append(f"{mallard.name}: {mallard.perform_quack()}, {mallard.perform_fly()}")
    model = ModelDuck(strict=strict)
    lines.append(f"{model.name}: {model.perform_fly()}")
    model.set_fly_behavior(FlyRocketPowered())
    lines.append(f"{model.name}: {model.perform_fly()}")

    section("Decorator")
    for drink in (Espresso(), engine.build_chain(DarkRoast(), Mocha, Whip)):
        lines.append(f"{drink.description()} ${drink.cost()}")

    section("Command")
    light = Light("Living Room")
    remote = RemoteControl(engine.invoker)
    remote.set_command("light", *light_commands(light))
    remote.on_pressed("light")
    lines.append(f"{light.location} light on: {light.is_on}")
    remote.undo_pressed()
    lines.append(f"{light.location} light after undo: {light.is_on}")

    section("Observer")
    current = CurrentConditionsDisplay()
    stats = StatisticsDisplay()
    engine.hub.subscribe("weather", current)
    engine.hub.subscribe("weather", stats)
    station = WeatherData(engine.hub)
    result = station.set_measurements(80, 65, 30.4)
    lines.append(f"{current.last}")
    lines.append(f"{stats.last}")
    lines.append(f"Notified {result.delivered} subscriber(s)")

    return lines
