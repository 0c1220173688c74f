from datetime import datetime, timezone
from pathlib import Path


def append_log(log_path: Path, domain: str, level: str, message: str) -> None:
    """Append one ``[timestamp] [domain] LEVEL: message`` line to the unified logfile.

    Controllers call this from inside an operation, so it never raises: a logfile
    that cannot be written (read-only home, parent is a file) is skipped silently.
    Multi-line messages are folded onto one line to keep one entry per line.

    Args:
        log_path: Path to the logfile; its parent directory is created on demand
        domain: Writer of the entry ('service', 'log')
        level: DEBUG, INFO, WARN or ERROR
        message: Entry text
    """
    entry = " | ".join(part.strip() for part in message.splitlines() if part.strip()) or message
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"[{timestamp}] [{domain}] {level.upper()}: {entry}\n")
    except OSError:
        return
