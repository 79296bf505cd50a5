"""Process-wide configuration for the niuNiu SDK backend."""

from niuniu_config.config import (
    Config,
    ConfigError,
    get_config,
    init_config,
    init_config_or_exit,
)


__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigError",
    "__version__",
    "get_config",
    "init_config",
    "init_config_or_exit",
]
