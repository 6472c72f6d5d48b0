"""Configuration module using Pydantic Settings.

Usage:
    from composekit.config import EngineSettings

    settings = EngineSettings(strict_roles=True)
"""

from composekit.config.settings import DEFAULT_MAX_CHAIN_DEPTH, EngineSettings

__all__ = [
    "DEFAULT_MAX_CHAIN_DEPTH",
    "EngineSettings",
]
