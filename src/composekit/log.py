"""Logging setup for applications embedding composekit.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed by the application (the CLI calls setup_logging).
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stdout handler to the ``composekit`` logger.

    Calling again only updates the level.

    Args:
        level: Logging level as int or name ("DEBUG", "info", ...).

    Returns:
        The package root logger.
    """
    global _handler

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    root = logging.getLogger("composekit")
    root.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(_handler)
    _handler.setLevel(level)
    return root
