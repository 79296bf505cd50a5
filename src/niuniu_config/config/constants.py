"""Constants for the configuration module."""

# Config document lookup
DEFAULT_CONFIG_NAME = "config"
DEFAULT_CONFIG_TYPE = "yaml"

# File extensions tried, in order, for each supported config type
CONFIG_TYPE_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "yaml": ("yaml", "yml"),
    "yml": ("yml", "yaml"),
}

# Environment overlay
ENV_KEY_SEPARATOR = "."
ENV_KEY_SHELL_SEPARATOR = "__"

# Prefix of the variables that configure the loader itself
LOADER_ENV_PREFIX = "NIUNIU_"

# Message prefix used when startup aborts
FATAL_MESSAGE_PREFIX = "fatal error config file"

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_CLI = "cli"
