"""Unit tests for svcctl.api.service.OperationResult."""

from dataclasses import FrozenInstanceError

import pytest

from svcctl.api.service.OperationResult import OperationResult
from svcctl.api.service.ServiceDescriptor import ServiceDescriptor
from svcctl.api.service.ServiceState import ServiceState, StartType

pytestmark = pytest.mark.service


def test_success_requires_running():
    with pytest.raises(ValueError, match="must end Running"):
        OperationResult(service_name="Alpha", operation="start", succeeded=True, final_status=ServiceState.STOPPED)


def test_killed_count_cannot_be_negative():
    with pytest.raises(ValueError, match="killed_process_count"):
        OperationResult(service_name="Alpha", operation="restart", succeeded=False, killed_process_count=-1)


def test_durations_are_rounded_and_clamped():
    result = OperationResult(
        service_name="Alpha",
        operation="restart",
        succeeded=True,
        final_status=ServiceState.RUNNING,
        stop_duration_secs=10.504999,
        start_duration_secs=-0.001,
        total_duration_secs=12.3456,
    )

    assert result.stop_duration_secs == 10.5
    assert result.start_duration_secs == 0.0
    assert result.total_duration_secs == 12.35


def test_result_is_immutable():
    result = OperationResult(service_name="Alpha", operation="start", succeeded=False)

    with pytest.raises(FrozenInstanceError):
        result.succeeded = True  # type: ignore[misc]


def test_to_dict_renders_unknown_statuses_as_empty():
    data = OperationResult(service_name="Ghost", operation="start", succeeded=False, error_type="X").to_dict()

    assert data["previous_status"] == ""
    assert data["final_status"] == ""
    assert data["descriptor"] is None
    assert "operation" not in data
    assert "warnings" not in data


def test_to_dict_includes_descriptor():
    descriptor = ServiceDescriptor(
        name="Alpha",
        display_name="Alpha Service",
        status=ServiceState.RUNNING,
        start_type=StartType.MANUAL,
        dependencies=frozenset({"b", "a"}),
        backing_process_id=99,
    )
    data = OperationResult(
        service_name="alpha",
        operation="start",
        succeeded=True,
        previous_status=ServiceState.STOPPED,
        final_status=ServiceState.RUNNING,
        descriptor=descriptor,
    ).to_dict()

    assert data["previous_status"] == "Stopped"
    assert data["final_status"] == "Running"
    assert data["descriptor"]["dependencies"] == ["a", "b"]
    assert data["descriptor"]["backing_process_id"] == 99
    assert data["descriptor"]["status"] == "Running"
