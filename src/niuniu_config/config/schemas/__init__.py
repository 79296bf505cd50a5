"""Configuration schema definitions."""

from niuniu_config.config.schemas.app import (
    Config,
    DbConfig,
    LogConfig,
    MsgChannelType,
    PathConfig,
)
from niuniu_config.config.schemas.base import ChannelType, LogLevel


__all__ = [
    "ChannelType",
    "Config",
    "DbConfig",
    "LogConfig",
    "LogLevel",
    "MsgChannelType",
    "PathConfig",
]
