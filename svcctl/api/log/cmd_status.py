"""Log status command - show logfile status after auto-pruning by retention."""

from collections.abc import Iterator
from datetime import datetime

from ..config.LogConfig import LogConfig
from ..config.SvcctlConfig import SvcctlConfig
from ..StageResult import StageResult
from . import LogStatusOutput
from .LOG_PATTERN import LOG_PATTERN
from .read_log_entries import read_log_entries


def cmd_status() -> StageResult:
    """Show logfile status after auto-pruning expired entries by retention."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        warnings: list[str] = []
        try:
            log_cfg = SvcctlConfig.load().log
        except ValueError as e:
            # Retention still applies without a config file
            log_cfg = LogConfig()
            warnings.append(f"Using default log retention: {e}")
        log_path = SvcctlConfig.get_logfile_path()

        counts = {"debug": 0, "info": 0, "warn": 0, "error": 0}
        oldest_entry: str | None = None
        newest_entry: str | None = None

        def finish(success: bool, message: str, errors: list[str], size_bytes: int = 0) -> None:
            result_obj.result = message
            result_obj.output = LogStatusOutput(
                errors=errors,
                warnings=warnings,
                log_path=str(log_path),
                size_bytes=size_bytes,
                entry_counts=counts,
                oldest_entry=oldest_entry,
                newest_entry=newest_entry,
            ).model_dump(mode="python")
            result_obj.success = success

        if not log_path.exists():
            yield (1.0, "Complete")
            finish(True, "Log file status (no entries yet)", [])
            return

        yield (0.2, "Pruning expired entries...")
        read_log_entries(
            log_path,
            debug_retention_days=log_cfg.debug_retention_days,
            info_retention_days=log_cfg.info_retention_days,
            warning_retention_days=log_cfg.warning_retention_days,
            error_retention_days=log_cfg.error_retention_days,
        )

        yield (0.5, "Counting entries...")
        try:
            lines = log_path.read_text(errors="ignore").splitlines()
        except OSError as e:
            yield (1.0, "Complete")
            finish(False, f"Failed to read log: {e}", [str(e)])
            return

        for line in lines:
            match = LOG_PATTERN.match(line.strip())
            if not match:
                continue
            counts[match.group(3).lower()] += 1
            try:
                ts = datetime.fromisoformat(match.group(1)).isoformat()
            except ValueError:
                continue
            if oldest_entry is None or ts < oldest_entry:
                oldest_entry = ts
            if newest_entry is None or ts > newest_entry:
                newest_entry = ts

        yield (1.0, "Complete")
        finish(True, "Log file status", [], log_path.stat().st_size)

    return StageResult(
        announce="Checking log status...",
        progress_callback=do_work,
    )
