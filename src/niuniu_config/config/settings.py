"""Loader settings powered by Pydantic BaseSettings."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from niuniu_config.config.constants import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_CONFIG_TYPE,
    LOADER_ENV_PREFIX,
)


class LoaderSettings(BaseSettings):
    """Where and how the loader looks for the config document.

    Only the NIUNIU_-prefixed variables are read here; the overlay of the
    document itself is handled by the environment binding table.
    """

    model_config = SettingsConfigDict(env_prefix=LOADER_ENV_PREFIX, case_sensitive=False)

    config_name: str = DEFAULT_CONFIG_NAME
    config_type: str = DEFAULT_CONFIG_TYPE
    config_dirs: str = Field(
        default="",
        description="Extra search directories, separated by os.pathsep.",
    )

    def search_dirs(self, cwd: Path | None = None) -> list[Path]:
        """Search directories in lookup order.

        The working directory always comes first, followed by any
        configured extra directories.
        """
        dirs = [cwd or Path.cwd()]
        dirs.extend(Path(part) for part in self.config_dirs.split(os.pathsep) if part)
        return dirs


def get_loader_settings() -> LoaderSettings:
    """Get a loader settings instance."""
    return LoaderSettings()
