"""Domain-specific error types for configuration loading."""

from pathlib import Path


class ConfigError(Exception):
    """Base class for every configuration loading failure."""


class ConfigTypeError(ConfigError):
    """The requested document type has no registered extensions.

    Attributes:
        config_type: Type name that was requested.
        error_type: Always 'unsupported_config_type'.
    """

    error_type = "unsupported_config_type"

    def __init__(self, config_type: str, supported: list[str]) -> None:
        self.config_type = config_type
        names = ", ".join(supported)
        super().__init__(f"Unsupported config type: {config_type!r} (supported: {names})")


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """No config file exists in any search directory.

    Attributes:
        config_name: Base name that was searched for.
        search_dirs: Directories that were searched, in order.
    """

    def __init__(self, config_name: str, search_dirs: list[Path]) -> None:
        self.config_name = config_name
        self.search_dirs = search_dirs
        dirs = ", ".join(str(d) for d in search_dirs) or "<none>"
        super().__init__(f'Config File "{config_name}" Not Found in [{dirs}]')


class ConfigReadError(ConfigError):
    """The config file exists but could not be read.

    Attributes:
        file_path: Path of the unreadable file.
    """

    def __init__(self, file_path: Path, reason: str) -> None:
        self.file_path = file_path
        super().__init__(f"Cannot read config file {file_path}: {reason}")


class ConfigParseError(ConfigError):
    """The config file is not a valid YAML mapping.

    Attributes:
        file_path: Path of the offending file.
        error_type: 'yaml_parse_error' or 'not_a_mapping'.
    """

    def __init__(
        self, file_path: Path, reason: str, error_type: str = "yaml_parse_error"
    ) -> None:
        self.file_path = file_path
        self.error_type = error_type
        super().__init__(f"Cannot parse config file {file_path}: {reason}")


class ConfigValidationError(ConfigError):
    """A recognized value could not be decoded into its field type.

    Attributes:
        errors: Error details with 'loc', 'msg' and 'type' keys.
        file_path: Path of the document that was decoded.
    """

    def __init__(self, errors: list[dict[str, str]], file_path: Path) -> None:
        self.errors = errors
        self.file_path = file_path
        details = "; ".join(f"{err['loc']}: {err['msg']}" for err in errors)
        super().__init__(
            f"Decoding failed for {file_path}: {len(errors)} errors ({details})"
        )


class ConfigNotInitializedError(ConfigError):
    """The process-wide record was read before init_config() completed."""
