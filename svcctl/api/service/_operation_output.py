"""Turn an OperationResult into a command's output dict."""

from pydantic import BaseModel

from .OperationResult import OperationResult


def _operation_output(output_class: type[BaseModel], result: OperationResult) -> dict:
    return output_class(
        errors=[f"{result.error_type}: {result.error_message}"] if not result.succeeded else [],
        warnings=list(result.warnings),
        **result.to_dict(),
    ).model_dump(mode="python")


def _config_error_output(output_class: type[BaseModel], name: str, error: Exception) -> dict:
    """Output for a failure before any operation ran (e.g. missing config)."""
    return output_class(
        errors=[str(error)],
        warnings=[],
        service_name=name,
        succeeded=False,
        error_type=type(error).__name__,
        error_message=str(error),
        previous_status="",
        final_status="",
        was_forced=False,
        killed_process_count=0,
        stop_duration_secs=0.0,
        start_duration_secs=0.0,
        total_duration_secs=0.0,
        descriptor=None,
    ).model_dump(mode="python")
