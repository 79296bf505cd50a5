"""Base schema types for configuration."""

from enum import Enum


class ChannelType(str, Enum):
    """Messaging backend selector.

    gochannel: in-process channel, single node only
    kafka: external broker, allows distributed deployment
    """

    GOCHANNEL = "gochannel"
    KAFKA = "kafka"


class LogLevel(str, Enum):
    """Recognized log level names."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"
    PANIC = "panic"
