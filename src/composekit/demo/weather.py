"""Weather station publishing measurements to display subscribers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from composekit.events import NotificationHub

TOPIC = "weather"


@dataclass(slots=True, frozen=True)
class Measurements:
    temperature: float
    humidity: float
    pressure: float


class WeatherData:
    """Subject publishing on every measurement change."""

    def __init__(self, hub: NotificationHub) -> None:
        self._hub = hub
        self.current: Measurements | None = None

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> Any:
        self.current = Measurements(temperature, humidity, pressure)
        return self._hub.publish(TOPIC, self.current)


class CurrentConditionsDisplay:
    def __init__(self) -> None:
        self.last: str | None = None

    def notify(self, topic: str, payload: Measurements) -> None:
        self.last = (
            f"Current conditions: {payload.temperature:g}F degrees "
            f"and {payload.humidity:g}% humidity"
        )


class StatisticsDisplay:
    def __init__(self) -> None:
        self.readings: list[float] = []

    def notify(self, topic: str, payload: Measurements) -> None:
        self.readings.append(payload.temperature)

    @property
    def last(self) -> str | None:
        if not self.readings:
            return None
        avg = sum(self.readings) / len(self.readings)
        return f"Avg/Max/Min temperature = {avg:g}/{max(self.readings):g}/{min(self.readings):g}"
