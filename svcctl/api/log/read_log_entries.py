from datetime import datetime, timedelta, timezone
from pathlib import Path

from .LOG_PATTERN import LOG_PATTERN


def read_log_entries(
    log_path: Path,
    debug_retention_days: float = 0.5,
    info_retention_days: float = 1.0,
    warning_retention_days: float = 2.0,
    error_retention_days: float = 7.0,
    domain: str | None = None,
) -> tuple[list[str], list[str]]:
    """Read log entries, filtering expired ones and returning (warnings, errors).

    Expired entries are removed from the file when reading (prune-on-access).
    When ``domain`` is given, only that domain's warnings and errors are returned,
    but pruning still applies to every entry.

    Returns:
        Tuple of (warnings, errors) lists
    """
    warnings: list[str] = []
    errors: list[str] = []

    if not log_path.exists():
        return warnings, errors

    now = datetime.now(timezone.utc)
    cutoffs = {
        "DEBUG": now - timedelta(days=debug_retention_days),
        "INFO": now - timedelta(days=info_retention_days),
        "WARN": now - timedelta(days=warning_retention_days),
        "ERROR": now - timedelta(days=error_retention_days),
    }

    kept_lines: list[str] = []

    try:
        for line in log_path.read_text(errors="ignore").splitlines():
            stripped = line.strip()
            if not stripped:
                continue

            match = LOG_PATTERN.match(stripped)
            if not match:
                # Not ours; keep it untouched
                kept_lines.append(stripped)
                continue

            try:
                entry_time = datetime.fromisoformat(match.group(1))
            except ValueError:
                entry_time = now

            level = match.group(3).upper()
            if entry_time < cutoffs.get(level, now):
                continue

            kept_lines.append(stripped)
            if domain is not None and match.group(2) != domain:
                continue
            if level == "ERROR":
                errors.append(stripped)
            elif level == "WARN":
                warnings.append(stripped)

        log_path.write_text("\n".join(kept_lines) + "\n" if kept_lines else "", encoding="utf-8")
    except OSError:
        pass

    return warnings, errors
