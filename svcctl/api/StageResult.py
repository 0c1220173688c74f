"""Outcome of a ``cmd_*`` function: what the CLI announces, streams and prints."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Returned before any work runs; the work happens while ``progress_callback`` is consumed.

    The callback yields ``(fraction, message)`` pairs (e.g. ``(0.3, "Starting nginx...")``)
    and, before it is exhausted, fills in ``result``, ``output`` and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    """One-line summary shown on stderr, e.g. 'nginx.service is running (waited 1.20s)'."""
    output: dict = field(default_factory=dict)
    """Schema-validated payload printed on stdout."""
    success: bool = False
    """Drives the CLI exit code."""
