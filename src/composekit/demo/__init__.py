"""Demonstration components: ducks, beverages, a remote control, a weather station.

This package demonstrates library usage and backs the CLI; it is not part
of the core API.
"""

from composekit.demo.scenario import run_demo

__all__ = [
    "run_demo",
]
