"""Configuration settings using Pydantic Settings.

Provides typed engine configuration with environment variable support.

Usage:
    from composekit.config import EngineSettings

    # Load from environment variables (COMPOSEKIT_*)
    settings = EngineSettings()

    # Or override with explicit values
    settings = EngineSettings(strict_roles=True, max_undo_history=50)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_CHAIN_DEPTH = 1000


class EngineSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for an Engine and the components it builds.

    Attributes:
        strict_roles: Reject re-registration of an existing role.
        max_chain_depth: Maximum number of wrapper layers in one chain.
        max_undo_history: Bound on the undo stack (None for unbounded).
        weak_subscribers: Hold subscribers by weak reference by default.
        trace: Record command and publish events in a history store.
        trace_max_records: Bound on the history store (None for unbounded).
        log_level: Level passed to setup_logging by the CLI.

    Environment Variables:
        COMPOSEKIT_STRICT_ROLES
        COMPOSEKIT_MAX_CHAIN_DEPTH
        COMPOSEKIT_MAX_UNDO_HISTORY
        COMPOSEKIT_WEAK_SUBSCRIBERS
        COMPOSEKIT_TRACE
        COMPOSEKIT_TRACE_MAX_RECORDS
        COMPOSEKIT_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPOSEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_roles: bool = False
    max_chain_depth: int = Field(default=DEFAULT_MAX_CHAIN_DEPTH, ge=1)
    max_undo_history: int | None = Field(default=None, ge=1)
    weak_subscribers: bool = True
    trace: bool = False
    trace_max_records: int | None = Field(default=1000, ge=1)
    log_level: str = "WARNING"
