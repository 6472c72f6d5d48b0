"""Demo scenario and CLI integration tests."""

import logging
import sys

import pytest

sys.path.insert(0, "src")

from composekit import Engine, log
from composekit.cli import main
from composekit.demo import run_demo
from composekit.demo.ducks import FlyNoWay, MallardDuck, RubberDuck
from composekit.demo.remote import Light, RemoteControl, Stereo, light_commands, party_mode
from composekit.demo.weather import CurrentConditionsDisplay, StatisticsDisplay, WeatherData

EXPECTED = [
    "== Strategy",
    "Mallard: Quack, Flying with wings",
    "Model duck: I can't fly",
    "Model duck: Flying with a rocket",
    "== Decorator",
    "Espresso $1.99",
    "Dark Roast Coffee, Mocha, Whip $1.29",
    "== Command",
    "Living Room light on: True",
    "Living Room light after undo: False",
    "== Observer",
    "Current conditions: 80F degrees and 65% humidity",
    "Avg/Max/Min temperature = 80/80/80",
    "Notified 2 subscriber(s)",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("STRICT_ROLES", "LOG_LEVEL", "WEAK_SUBSCRIBERS"):
        monkeypatch.delenv(f"COMPOSEKIT_{name}", raising=False)
    yield
    reset_logging()


def reset_logging():
    """Detach the CLI's handler; it points at a stream captured by this test."""
    if log._handler is not None:
        logging.getLogger("composekit").removeHandler(log._handler)
        log._handler = None
    logging.getLogger("composekit").setLevel(logging.NOTSET)


def test_setup_logging_is_idempotent():
    root = log.setup_logging("debug")
    log.setup_logging(logging.INFO)

    assert root.level == logging.INFO
    assert root.handlers.count(log._handler) == 1


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        log.setup_logging("LOUD")


def test_run_demo():
    assert run_demo(Engine()) == EXPECTED


def test_run_demo_without_headings():
    lines = run_demo(Engine(), headings=False)
    assert lines == [line for line in EXPECTED if not line.startswith("==")]


def test_cli_prints_demo(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == EXPECTED


def test_cli_strict_quiet(capsys):
    """Strict roles still allow explicit strategy replacement."""
    assert main(["--strict", "--quiet"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "Model duck: Flying with a rocket" in out
    assert not any(line.startswith("==") for line in out)


def test_cli_reports_library_errors(capsys, monkeypatch):
    from composekit import UnknownRoleError
    from composekit import cli

    def failing_demo(engine, headings=True):
        raise UnknownRoleError("swim")

    monkeypatch.setattr(cli, "run_demo", failing_demo)

    assert main(["--quiet"]) == 1
    assert "swim" in capsys.readouterr().err


def test_rubber_duck_strategy_swap():
    duck = RubberDuck()
    assert duck.perform_quack() == "Squeak"
    assert duck.perform_fly() == "I can't fly"

    mallard = MallardDuck(strict=True)
    mallard.set_fly_behavior(FlyNoWay())
    assert mallard.perform_fly() == "I can't fly"


def test_remote_party_mode_undo():
    kitchen, porch = Light("Kitchen"), Light("Porch")
    stereo = Stereo()
    remote = RemoteControl()
    _, porch_off = light_commands(porch)
    remote.set_command("party", party_mode(kitchen, porch, stereo=stereo), porch_off)

    remote.on_pressed("party")
    assert kitchen.is_on and porch.is_on and stereo.volume == 5

    remote.undo_pressed()
    assert not kitchen.is_on and not porch.is_on and stereo.volume == 0


def test_weather_statistics():
    engine = Engine()
    stats = StatisticsDisplay()
    current = CurrentConditionsDisplay()
    engine.hub.subscribe("weather", stats)
    engine.hub.subscribe("weather", current)
    station = WeatherData(engine.hub)

    station.set_measurements(80, 65, 30.4)
    station.set_measurements(82, 70, 29.2)
    station.set_measurements(78, 90, 29.2)

    assert stats.last == "Avg/Max/Min temperature = 80/82/78"
    assert current.last == "Current conditions: 78F degrees and 90% humidity"
