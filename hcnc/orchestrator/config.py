"""
OrchestratorConfig — Configuration for parallel file scanning

Loads worker settings from environment variables, with defaults that
work on any machine.

Environment variables:
- HCNC_PARALLEL_ENABLED: Enable/disable the thread pool (default: true)
- HCNC_IO_WORKERS: Thread pool size for file reads (default: 4)
- HCNC_TASK_TIMEOUT: Per-file timeout in seconds (default: 60)
- HCNC_SHUTDOWN_TIMEOUT: Pool shutdown timeout in seconds (default: 10)
"""

import os
from dataclasses import dataclass


@dataclass
class OrchestratorConfig:
    """
    Configuration for the task orchestrator.

    Loaded from environment variables with sensible defaults.
    """

    # Feature toggle (False runs every task inline, in order)
    enabled: bool = True

    # Worker pool size
    io_workers: int = 4

    # Timeouts
    task_timeout: float = 60.0             # Per-task result wait (seconds)
    shutdown_timeout: float = 10.0         # Pool shutdown timeout (seconds)

    @classmethod
    def from_env(cls) -> 'OrchestratorConfig':
        """Load configuration from environment variables."""
        return cls(
            enabled=_get_bool_env("HCNC_PARALLEL_ENABLED", True),
            io_workers=_get_int_env("HCNC_IO_WORKERS", 4),
            task_timeout=_get_float_env("HCNC_TASK_TIMEOUT", 60.0),
            shutdown_timeout=_get_float_env("HCNC_SHUTDOWN_TIMEOUT", 10.0),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.io_workers < 1:
            raise ValueError("HCNC_IO_WORKERS must be >= 1")
        if self.task_timeout <= 0:
            raise ValueError("HCNC_TASK_TIMEOUT must be > 0")
        if self.shutdown_timeout < 0:
            raise ValueError("HCNC_SHUTDOWN_TIMEOUT must be >= 0")

    def to_dict(self) -> dict:
        """Serialize for display/logging."""
        return {
            "enabled": self.enabled,
            "io_workers": self.io_workers,
            "task_timeout": self.task_timeout,
            "shutdown_timeout": self.shutdown_timeout,
        }


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable (unparseable values fall back)."""
    value = os.environ.get(key, "")
    if value:
        try:
            return int(value)
        except ValueError:
            return default
    return default


def _get_float_env(key: str, default: float) -> float:
    """Get float from environment variable (unparseable values fall back)."""
    value = os.environ.get(key, "")
    if value:
        try:
            return float(value)
        except ValueError:
            return default
    return default
