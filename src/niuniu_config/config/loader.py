"""Configuration loader with environment overlay and state machine."""

import hashlib
import json
import os
import time
from collections.abc import Mapping
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from niuniu_config.config.constants import (
    COMPONENT_CONFIG,
    CONFIG_TYPE_EXTENSIONS,
    DEFAULT_CONFIG_NAME,
    DEFAULT_CONFIG_TYPE,
)
from niuniu_config.config.env import (
    CONFIG_ENV_BINDINGS,
    apply_env_overrides,
    collect_env_overrides,
)
from niuniu_config.config.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigTypeError,
    ConfigValidationError,
)
from niuniu_config.config.schemas import Config
from niuniu_config.config.state_machine import LoaderState, LoaderStateMachine
from niuniu_config.data_model import fold_keys
from niuniu_config.observability.metrics import LoaderMetrics


logger = structlog.get_logger()


class ConfigLoader:
    """Locates, parses and decodes the config document.

    Implements a state machine for a single load:
    UNLOADED -> LOCATING -> PARSED -> READY

    Each loader instance loads once. The returned Config is immutable.
    """

    def __init__(
        self,
        search_dirs: list[Path] | None = None,
        config_name: str = DEFAULT_CONFIG_NAME,
        config_type: str = DEFAULT_CONFIG_TYPE,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            search_dirs: Directories searched in order. Defaults to the
                current working directory only.
            config_name: Base name of the config file, without extension.
            config_type: Document type; only YAML is supported.
            environ: Environment to overlay. Defaults to os.environ.

        Raises:
            ConfigTypeError: If config_type is not a supported type.
        """
        if config_type not in CONFIG_TYPE_EXTENSIONS:
            raise ConfigTypeError(config_type, sorted(CONFIG_TYPE_EXTENSIONS))
        self._search_dirs = list(search_dirs) if search_dirs else [Path.cwd()]
        self._config_name = config_name
        self._config_type = config_type
        self._environ = environ
        self._state_machine = LoaderStateMachine()
        self._config_file: Path | None = None
        self._file_checksum: str | None = None
        self._env_overrides: list[str] = []
        self._errors: list[dict[str, str]] = []
        self._load_duration_ms: float = 0

    @property
    def state(self) -> LoaderState:
        """Get the current loader state."""
        return self._state_machine.state

    @property
    def search_dirs(self) -> list[Path]:
        """Get the directories searched, in order."""
        return self._search_dirs.copy()

    @property
    def config_file(self) -> Path | None:
        """Get the path of the file that was found, if any."""
        return self._config_file

    @property
    def file_checksum(self) -> str | None:
        """Get the SHA-256 checksum of the loaded file."""
        return self._file_checksum

    @property
    def env_overrides(self) -> list[str]:
        """Get the environment keys that overrode file values."""
        return self._env_overrides.copy()

    @property
    def errors(self) -> list[dict[str, str]]:
        """Get loading errors if any."""
        return self._errors.copy()

    @property
    def load_duration_ms(self) -> float:
        """Get load duration in milliseconds."""
        return self._load_duration_ms

    def candidate_files(self) -> list[Path]:
        """List every path that is tried, in lookup order."""
        extensions = CONFIG_TYPE_EXTENSIONS[self._config_type]
        return [
            directory / f"{self._config_name}.{ext}"
            for directory in self._search_dirs
            for ext in extensions
        ]

    def locate(self) -> Path:
        """Find the first existing config file on the search path.

        Raises:
            ConfigFileNotFoundError: If no candidate exists.
        """
        for candidate in self.candidate_files():
            if candidate.is_file():
                return candidate
        raise ConfigFileNotFoundError(self._config_name, self._search_dirs)

    def _read_document(self, file_path: Path) -> dict[str, object]:
        """Read and parse a YAML document, recording its checksum.

        Raises:
            ConfigReadError: If the file cannot be read or decoded.
            ConfigParseError: If the YAML is invalid or not a mapping.
        """
        try:
            content_bytes = file_path.read_bytes()
            content_str = content_bytes.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(file_path, str(e)) from e

        self._file_checksum = hashlib.sha256(content_bytes).hexdigest()

        try:
            parsed = yaml.safe_load(content_str)
        except yaml.YAMLError as e:
            raise ConfigParseError(file_path, str(e)) from e

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            msg = f"top level is {type(parsed).__name__}, expected a mapping"
            raise ConfigParseError(file_path, msg, error_type="not_a_mapping")
        return parsed

    def load(self) -> Config:
        """Locate, parse, overlay and decode the config document.

        Returns:
            Fully populated Config record.

        Raises:
            ConfigFileNotFoundError: If no config file exists.
            ConfigReadError: If the file cannot be read.
            ConfigParseError: If the file is not a YAML mapping.
            ConfigValidationError: If a value cannot be decoded.
            LoaderStateError: If this loader was already used.
        """
        metrics = LoaderMetrics.get_instance()
        start_time = time.perf_counter()

        self._state_machine.transition(LoaderState.LOCATING)

        log = logger.bind(component=COMPONENT_CONFIG, phase="LOCATING")

        try:
            self._config_file = self.locate()
            log.info("loading_config_file", file_path=str(self._config_file))
            document = self._read_document(self._config_file)
            metrics.record_file_loaded()

            self._state_machine.transition(LoaderState.PARSED)
            log = log.bind(phase="PARSED", file_path=str(self._config_file))
            log.info(
                "config_file_loaded",
                file_sha256=self._file_checksum,
                top_level_keys=sorted(str(key) for key in document),
            )

            environ = os.environ if self._environ is None else self._environ
            overrides = collect_env_overrides(environ, CONFIG_ENV_BINDINGS)
            merged = apply_env_overrides(fold_keys(Config, document), overrides)
            self._env_overrides = sorted(binding.env_key for binding in overrides)
            metrics.record_env_overrides(len(overrides))
            if overrides:
                # Values may hold credentials, only key names are logged.
                log.info("config_env_overrides_applied", env_keys=self._env_overrides)

            config = Config.model_validate(merged)

        except ConfigFileNotFoundError as e:
            self._fail("file_not_found", "file", str(e), log, "config_file_not_found")
            metrics.record_load_error()
            raise

        except ConfigReadError as e:
            self._fail("file_unreadable", "file", str(e), log, "config_read_failed")
            metrics.record_load_error()
            raise

        except ConfigParseError as e:
            self._fail(e.error_type, "yaml", str(e), log, "config_yaml_parse_error")
            metrics.record_load_error()
            raise

        except ValidationError as e:
            self._handle_validation_error(e, log)
            metrics.record_load_error()
            raise ConfigValidationError(self.errors, self._config_file) from e

        self._state_machine.transition(LoaderState.READY)
        self._load_duration_ms = (time.perf_counter() - start_time) * 1000
        metrics.record_load_duration(self._load_duration_ms)
        log.info(
            "config_ready",
            phase="READY",
            app_name=config.app_name,
            channel_type=config.msg_channel.channel_type,
            config_load_duration_ms=self._load_duration_ms,
        )
        return config

    def _fail(
        self,
        error_type: str,
        loc: str,
        message: str,
        log: structlog.stdlib.BoundLogger,
        event: str,
    ) -> None:
        """Record a file-level failure and move to FAILED."""
        self._state_machine.transition(LoaderState.FAILED)
        self._errors.append({"loc": loc, "msg": message, "type": error_type})
        log.error(event, phase="FAILED", error=message)

    def _handle_validation_error(
        self,
        error: ValidationError,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        """Handle Pydantic decode error."""
        self._state_machine.transition(LoaderState.FAILED)

        for err in error.errors(include_url=False):
            self._errors.append(
                {
                    "loc": ".".join(str(loc) for loc in err["loc"]),
                    "msg": err["msg"],
                    "type": err["type"],
                }
            )

        log.error(
            "config_validation_failed",
            phase="FAILED",
            validation_error_count=len(self._errors),
            errors=self._errors,
        )

    def get_load_summary(self) -> dict[str, object]:
        """Get a summary of the load.

        Returns:
            Dictionary with load summary.
        """
        return {
            "state": self._state_machine.state.name,
            "finished": self._state_machine.is_terminal(),
            "ready": self._state_machine.is_ready(),
            "failed": self._state_machine.is_failed(),
            "search_dirs": [str(d) for d in self._search_dirs],
            "config_file": str(self._config_file) if self._config_file else None,
            "file_checksum": self._file_checksum,
            "env_overrides": self._env_overrides,
            "error_count": len(self._errors),
            "errors": self._errors,
            "load_duration_ms": self._load_duration_ms,
        }

    def get_load_summary_json(self) -> str:
        """Get load summary as JSON string with stable ordering."""
        return json.dumps(self.get_load_summary(), sort_keys=True, indent=2)


def load_config(
    search_dirs: list[Path] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load a Config with a fresh loader, for explicit passing to consumers.

    Raises:
        ConfigError: If the document cannot be located, read, parsed or decoded.
    """
    return ConfigLoader(search_dirs=search_dirs, environ=environ).load()
