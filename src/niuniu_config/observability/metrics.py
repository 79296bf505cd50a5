"""Metrics collection for configuration loading."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class LoaderMetrics:
    """Metrics for configuration loading.

    Attributes:
        load_duration_ms: Time taken by the last load.
        files_loaded: Number of config files parsed.
        env_overrides_applied: Environment values overlaid on documents.
        load_errors_total: Total failed loads.
    """

    load_duration_ms: float = 0.0
    files_loaded: int = 0
    env_overrides_applied: int = 0
    load_errors_total: int = 0

    _instance: ClassVar["LoaderMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "LoaderMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_load_duration(self, duration_ms: float) -> None:
        """Record load duration."""
        self.load_duration_ms = duration_ms

    def record_file_loaded(self) -> None:
        """Record a file loaded."""
        self.files_loaded += 1

    def record_env_overrides(self, count: int) -> None:
        """Record environment values applied by one load."""
        self.env_overrides_applied += count

    def record_load_error(self) -> None:
        """Record a failed load."""
        self.load_errors_total += 1

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "load_duration_ms": self.load_duration_ms,
            "files_loaded": self.files_loaded,
            "env_overrides_applied": self.env_overrides_applied,
            "load_errors_total": self.load_errors_total,
        }
