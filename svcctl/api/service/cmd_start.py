"""Service start command - brings a service to Running within a bounded wait."""

from collections.abc import Iterator

from ..config.SvcctlConfig import SvcctlConfig
from ..log.make_log_fn import make_log_fn
from ..StageResult import StageResult
from . import ServiceStartOutput
from ._operation_output import _config_error_output, _operation_output
from .Service import Service


def cmd_start(name: str, timeout: float | None = None, passthrough: bool = False) -> StageResult:
    """Start a service.

    Behavior:
    - **Disabled**: fails without touching the service
    - **Running**: succeeds immediately (no wait)
    - **Pending**: waits for Running
    - **Stopped**: issues one start command, then waits for Running

    Args:
        name: Service name (case-insensitive)
        timeout: Seconds to wait for Running; defaults to ``timeouts.default_start_secs``
        passthrough: Include the final service descriptor in the output
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SvcctlConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = _config_error_output(ServiceStartOutput, name, e)
            result_obj.success = False
            return

        wait_secs = timeout if timeout is not None else config.timeouts.default_start_secs
        log_fn = make_log_fn(SvcctlConfig.get_logfile_path(), config.log)

        yield (0.3, f"Starting {name} (timeout {wait_secs:g}s)...")
        try:
            with Service(config, log_fn=log_fn) as service:
                result = service.start(name, wait_secs, passthrough=passthrough)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = _config_error_output(ServiceStartOutput, name, e)
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if result.succeeded:
            result_obj.result = f"{name} is running (waited {result.start_duration_secs:.2f}s)"
        else:
            result_obj.result = f"Error starting {name}: {result.error_message}"
        result_obj.output = _operation_output(ServiceStartOutput, result)
        result_obj.success = result.succeeded

    return StageResult(
        announce=f"Starting service {name}...",
        progress_callback=do_work,
    )
