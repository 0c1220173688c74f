"""Log prune command - remove log entries by level."""

from collections.abc import Iterator

from ..config.SvcctlConfig import SvcctlConfig
from ..StageResult import StageResult
from . import LogPruneOutput
from .LOG_PATTERN import LOG_PATTERN


def cmd_prune(
    prune_info: bool = True,
    prune_warnings: bool = False,
    prune_errors: bool = False,
    prune_debug: bool = True,
) -> StageResult:
    """Remove log entries by level.

    Args:
        prune_info: Remove INFO entries (default: True)
        prune_warnings: Remove WARN entries (default: False)
        prune_errors: Remove ERROR entries (default: False)
        prune_debug: Remove DEBUG entries (default: True)
    """
    selected = {
        "DEBUG": prune_debug,
        "INFO": prune_info,
        "WARN": prune_warnings,
        "ERROR": prune_errors,
    }

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        log_path = SvcctlConfig.get_logfile_path()
        pruned = {"DEBUG": 0, "INFO": 0, "WARN": 0, "ERROR": 0}

        def finish(success: bool, message: str, errors: list[str]) -> None:
            result_obj.result = message
            result_obj.output = LogPruneOutput(
                errors=errors,
                warnings=[],
                pruned_debug=pruned["DEBUG"],
                pruned_info=pruned["INFO"],
                pruned_warnings=pruned["WARN"],
                pruned_errors=pruned["ERROR"],
                message=message,
            ).model_dump(mode="python")
            result_obj.success = success

        yield (0.3, "Reading log file...")
        if not log_path.exists():
            yield (1.0, "Complete")
            finish(True, "No log file found", [])
            return

        try:
            lines = log_path.read_text(errors="ignore").splitlines()
        except OSError as e:
            yield (1.0, "Complete")
            finish(False, f"Failed to read log: {e}", [str(e)])
            return

        yield (0.5, f"Processing {len(lines)} entries...")
        kept_lines: list[str] = []
        for line in lines:
            stripped = line.strip()
            if not stripped:
                continue
            match = LOG_PATTERN.match(stripped)
            level = match.group(3).upper() if match else ""
            if level and selected[level]:
                pruned[level] += 1
                continue
            kept_lines.append(stripped)

        yield (0.7, "Writing cleaned log...")
        try:
            log_path.write_text("\n".join(kept_lines) + "\n" if kept_lines else "", encoding="utf-8")
        except OSError as e:
            pruned = dict.fromkeys(pruned, 0)
            yield (1.0, "Complete")
            finish(False, f"Failed to write log: {e}", [str(e)])
            return

        yield (1.0, "Complete")
        finish(True, f"Pruned {sum(pruned.values())} log entries", [])

    return StageResult(
        announce="Pruning log entries...",
        progress_callback=do_work,
    )
