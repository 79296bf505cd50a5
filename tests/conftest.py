"""Shared fixtures for configuration tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from niuniu_config.config.env import CONFIG_ENV_BINDINGS
from niuniu_config.config.runtime import reset_config
from niuniu_config.observability.metrics import LoaderMetrics


@pytest.fixture(autouse=True)
def isolated_config_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without an installed record or overlay variables."""
    for binding in CONFIG_ENV_BINDINGS:
        monkeypatch.delenv(binding.env_key, raising=False)
        monkeypatch.delenv(binding.env_key.replace(".", "__"), raising=False)
    for name in ("NIUNIU_CONFIG_NAME", "NIUNIU_CONFIG_TYPE", "NIUNIU_CONFIG_DIRS"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    LoaderMetrics.reset()
    yield
    reset_config()
    LoaderMetrics.reset()
    structlog.reset_defaults()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a config.yaml into tmp_path and return its directory."""

    def _write(content: str, name: str = "config.yaml") -> Path:
        (tmp_path / name).write_text(content, encoding="utf-8")
        return tmp_path

    return _write
