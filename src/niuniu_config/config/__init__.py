"""Configuration loading and access module."""

from niuniu_config.config.errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigNotInitializedError,
    ConfigParseError,
    ConfigReadError,
    ConfigTypeError,
    ConfigValidationError,
)
from niuniu_config.config.loader import ConfigLoader, load_config
from niuniu_config.config.runtime import (
    get_config,
    init_config,
    init_config_or_exit,
    is_initialized,
    reset_config,
)
from niuniu_config.config.schemas import (
    ChannelType,
    Config,
    DbConfig,
    LogConfig,
    LogLevel,
    MsgChannelType,
    PathConfig,
)
from niuniu_config.config.state_machine import LoaderState, LoaderStateError


__all__ = [
    "ChannelType",
    "Config",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigLoader",
    "ConfigNotInitializedError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigTypeError",
    "ConfigValidationError",
    "DbConfig",
    "LoaderState",
    "LoaderStateError",
    "LogConfig",
    "LogLevel",
    "MsgChannelType",
    "PathConfig",
    "get_config",
    "init_config",
    "init_config_or_exit",
    "is_initialized",
    "load_config",
    "reset_config",
]
