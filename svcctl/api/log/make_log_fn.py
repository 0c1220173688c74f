"""Build the level-filtered log callable handed to the lifecycle controllers."""

from collections.abc import Callable
from pathlib import Path

from ..config.LogConfig import LogConfig
from .append_log import append_log


def make_log_fn(log_path: Path, log_config: LogConfig, domain: str = "service") -> Callable[[str, str], None]:
    """Return ``log_fn(level, message)`` writing ``domain`` entries at or above the configured level."""

    def log_fn(level: str, message: str) -> None:
        if log_config.enabled(level):
            append_log(log_path, domain, level, message)

    return log_fn
