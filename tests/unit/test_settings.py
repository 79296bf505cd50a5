"""Unit tests for LoaderSettings."""

import os
from pathlib import Path

import pytest

from niuniu_config.config.settings import LoaderSettings, get_loader_settings


class TestLoaderSettings:
    """Tests for loader settings read from NIUNIU_* variables."""

    @pytest.mark.unit
    def test_defaults(self, tmp_path: Path) -> None:
        """Test that only the working directory is searched by default."""
        settings = LoaderSettings()

        assert settings.config_name == "config"
        assert settings.config_type == "yaml"
        assert settings.search_dirs(cwd=tmp_path) == [tmp_path]

    @pytest.mark.unit
    def test_extra_dirs_follow_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that configured directories are searched after cwd."""
        monkeypatch.setenv(
            "NIUNIU_CONFIG_DIRS", os.pathsep.join(["/etc/niuniu", "", "/opt/niuniu"])
        )

        settings = get_loader_settings()

        assert settings.search_dirs(cwd=tmp_path) == [
            tmp_path,
            Path("/etc/niuniu"),
            Path("/opt/niuniu"),
        ]

    @pytest.mark.unit
    def test_name_and_type_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test case-insensitive NIUNIU_* variables."""
        monkeypatch.setenv("niuniu_config_name", "backend")
        monkeypatch.setenv("NIUNIU_CONFIG_TYPE", "yml")

        settings = LoaderSettings()

        assert settings.config_name == "backend"
        assert settings.config_type == "yml"
