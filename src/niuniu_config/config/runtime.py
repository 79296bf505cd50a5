"""Process-wide configuration record.

The record is installed once by init_config() during startup and read
through get_config() afterwards. Installation is guarded by a lock; reads
are lock-free since the slot is written once and Config is frozen.
"""

import threading
from collections.abc import Mapping
from pathlib import Path

import structlog

from niuniu_config.config.constants import COMPONENT_CONFIG, FATAL_MESSAGE_PREFIX
from niuniu_config.config.errors import ConfigError, ConfigNotInitializedError
from niuniu_config.config.loader import ConfigLoader
from niuniu_config.config.schemas import Config
from niuniu_config.config.settings import LoaderSettings


logger = structlog.get_logger()

_config: Config | None = None
_init_lock = threading.Lock()


def init_config(
    search_dirs: list[Path] | None = None,
    environ: Mapping[str, str] | None = None,
    settings: LoaderSettings | None = None,
) -> Config:
    """Load the config document and install it as the process-wide record.

    Only the first successful call loads; later calls return the installed
    record unchanged. A failed call installs nothing.

    Args:
        search_dirs: Directories to search. Defaults to the working
            directory followed by NIUNIU_CONFIG_DIRS.
        environ: Environment to overlay. Defaults to os.environ.
        settings: Loader settings. Defaults to reading NIUNIU_* variables.

    Returns:
        The installed record.

    Raises:
        ConfigError: If the document cannot be located, read, parsed or decoded.
    """
    global _config  # noqa: PLW0603

    if _config is not None:
        return _config

    with _init_lock:
        if _config is not None:
            return _config

        settings = settings or LoaderSettings()
        loader = ConfigLoader(
            search_dirs=search_dirs or settings.search_dirs(),
            config_name=settings.config_name,
            config_type=settings.config_type,
            environ=environ,
        )
        config = loader.load()
        _config = config
        logger.info(
            "config_installed",
            component=COMPONENT_CONFIG,
            config_file=str(loader.config_file),
            config_checksum=config.compute_checksum(),
        )
        return config


def init_config_or_exit(
    search_dirs: list[Path] | None = None,
    environ: Mapping[str, str] | None = None,
    settings: LoaderSettings | None = None,
) -> Config:
    """Run init_config() and terminate the process if it fails.

    Meant for program entry points: there is no retry and no fallback to
    defaults.

    Raises:
        SystemExit: With a message naming the underlying cause.
    """
    try:
        return init_config(search_dirs=search_dirs, environ=environ, settings=settings)
    except ConfigError as e:
        logger.critical("config_load_fatal", component=COMPONENT_CONFIG, error=str(e))
        raise SystemExit(f"{FATAL_MESSAGE_PREFIX}: {e}") from e


def get_config() -> Config:
    """Return the process-wide record.

    The record is frozen, so callers cannot alter what other callers see.

    Raises:
        ConfigNotInitializedError: If init_config() has not completed.
    """
    config = _config
    if config is None:
        msg = "get_config() called before init_config()"
        raise ConfigNotInitializedError(msg)
    return config


def is_initialized() -> bool:
    """Check whether a record has been installed."""
    return _config is not None


def reset_config() -> None:
    """Drop the installed record (primarily for testing)."""
    global _config  # noqa: PLW0603

    with _init_lock:
        _config = None
