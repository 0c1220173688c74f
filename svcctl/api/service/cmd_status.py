"""Service status command - shows one service's current descriptor."""

from collections.abc import Iterator

from ..config.SvcctlConfig import SvcctlConfig
from ..StageResult import StageResult
from . import ServiceStatusOutput
from .Service import Service
from .ServiceError import ServiceError


def _empty_status(errors: list[str]) -> dict:
    return ServiceStatusOutput(
        errors=errors,
        warnings=[],
        name="",
        display_name="",
        status="",
        start_type="",
        pid=-1,
        dependencies=[],
        dependents=[],
    ).model_dump(mode="python")


def cmd_status(name: str) -> StageResult:
    """Get the status of a service.

    Args:
        name: Service name (case-insensitive)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SvcctlConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = _empty_status([str(e)])
            result_obj.success = False
            return

        yield (0.5, f"Querying {name}...")
        try:
            with Service(config) as service:
                descriptor = service.status(name)
        except (ServiceError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = _empty_status([str(e)])
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"{descriptor.name} is {descriptor.status.value} ({descriptor.start_type.value})"
        result_obj.output = ServiceStatusOutput(
            errors=[],
            warnings=[],
            name=descriptor.name,
            display_name=descriptor.display_name,
            status=descriptor.status.value,
            start_type=descriptor.start_type.value,
            pid=descriptor.backing_process_id if descriptor.backing_process_id is not None else -1,
            dependencies=sorted(descriptor.dependencies),
            dependents=sorted(descriptor.dependents),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Checking status of {name}...",
        progress_callback=do_work,
    )
