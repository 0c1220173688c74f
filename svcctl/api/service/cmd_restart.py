"""Service restart command - stop, escalate to a forced kill if needed, start."""

from collections.abc import Iterator

from ..config.SvcctlConfig import SvcctlConfig
from ..log.make_log_fn import make_log_fn
from ..StageResult import StageResult
from . import ServiceRestartOutput
from ._operation_output import _config_error_output, _operation_output
from .Service import Service


def cmd_restart(
    name: str,
    stop_timeout: float | None = None,
    start_timeout: float | None = None,
    kill_dependents: bool = False,
    passthrough: bool = False,
) -> StageResult:
    """Force-restart a service.

    Behavior:
    - **Graceful first**: issues a stop and waits up to ``stop_timeout`` for Stopped
    - **Escalation**: if it does not stop, kills the backing process and waits briefly for Stopped
    - **Then starts**: after a short settle delay, starts and waits up to ``start_timeout``

    Dependents are reported but never killed, even with ``kill_dependents``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SvcctlConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = _config_error_output(ServiceRestartOutput, name, e)
            result_obj.success = False
            return

        stop_secs = stop_timeout if stop_timeout is not None else config.timeouts.default_stop_secs
        start_secs = start_timeout if start_timeout is not None else config.timeouts.default_start_secs
        log_fn = make_log_fn(SvcctlConfig.get_logfile_path(), config.log)

        yield (0.3, f"Restarting {name} (stop {stop_secs:g}s, start {start_secs:g}s)...")
        try:
            with Service(config, log_fn=log_fn) as service:
                result = service.force_restart(name, stop_secs, start_secs, kill_dependents, passthrough)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = _config_error_output(ServiceRestartOutput, name, e)
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if result.succeeded:
            how = "forced" if result.was_forced else "graceful"
            result_obj.result = f"{name} restarted ({how} stop, {result.total_duration_secs:.2f}s total)"
        else:
            result_obj.result = f"Error restarting {name}: {result.error_message}"
        result_obj.output = _operation_output(ServiceRestartOutput, result)
        result_obj.success = result.succeeded

    return StageResult(
        announce=f"Restarting service {name}...",
        progress_callback=do_work,
    )
