"""Tests for EngineSettings.

Why these tests exist:
- Defaults encode the documented behavior (overwrite allowed, depth 1000)
- Environment variables are the deployment-time override mechanism
"""

import pytest
from pydantic import ValidationError

from composekit.config import DEFAULT_MAX_CHAIN_DEPTH, EngineSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "STRICT_ROLES",
        "MAX_CHAIN_DEPTH",
        "MAX_UNDO_HISTORY",
        "WEAK_SUBSCRIBERS",
        "TRACE",
        "TRACE_MAX_RECORDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(f"COMPOSEKIT_{name}", raising=False)


def test_defaults():
    settings = EngineSettings()
    assert settings.strict_roles is False
    assert settings.max_chain_depth == DEFAULT_MAX_CHAIN_DEPTH == 1000
    assert settings.max_undo_history is None
    assert settings.weak_subscribers is True
    assert settings.trace is False
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COMPOSEKIT_STRICT_ROLES", "true")
    monkeypatch.setenv("COMPOSEKIT_MAX_CHAIN_DEPTH", "10")
    monkeypatch.setenv("COMPOSEKIT_MAX_UNDO_HISTORY", "5")

    settings = EngineSettings()

    assert settings.strict_roles is True
    assert settings.max_chain_depth == 10
    assert settings.max_undo_history == 5


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("COMPOSEKIT_TRACE=1\n", encoding="utf-8")
    assert EngineSettings().trace is True


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("COMPOSEKIT_MAX_CHAIN_DEPTH", "10")
    assert EngineSettings(max_chain_depth=20).max_chain_depth == 20


@pytest.mark.parametrize(
    "kwargs",
    [{"max_chain_depth": 0}, {"max_undo_history": 0}, {"trace_max_records": -1}],
)
def test_invalid_bounds(kwargs):
    with pytest.raises(ValidationError):
        EngineSettings(**kwargs)
