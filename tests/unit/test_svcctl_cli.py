"""Unit tests for svcctl.cli."""

import json
from unittest.mock import MagicMock, patch

import pytest
import yaml
from typer.testing import CliRunner

from svcctl.cli import main
from svcctl.cli._create_app import _create_app
from svcctl.cli.service import service

pytestmark = pytest.mark.cli

runner = CliRunner()


@patch("svcctl.cli.service.cmd_start")
@patch("svcctl.cli.service._handle_stage_result")
def test_start_passes_options(mock_handle_stage_result, mock_cmd_start):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(service(), ["start", "Alpha", "--timeout", "12.5", "--passthru"])

    assert result.exit_code == 0
    mock_handle_stage_result.assert_called_with(mock_cmd_start)
    mock_executor.assert_called_with("Alpha", timeout=12.5, passthrough=True)


@patch("svcctl.cli.service.cmd_start")
@patch("svcctl.cli.service._handle_stage_result")
def test_start_defaults(mock_handle_stage_result, mock_cmd_start):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(service(), ["start", "Alpha"])

    assert result.exit_code == 0
    mock_executor.assert_called_with("Alpha", timeout=None, passthrough=False)


@patch("svcctl.cli.service.cmd_restart")
@patch("svcctl.cli.service._handle_stage_result")
def test_restart_passes_options(mock_handle_stage_result, mock_cmd_restart):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(
        service(),
        ["restart", "Gamma", "--stop-timeout", "10", "--start-timeout", "30", "--kill-dependents"],
    )

    assert result.exit_code == 0
    mock_handle_stage_result.assert_called_with(mock_cmd_restart)
    mock_executor.assert_called_with(
        "Gamma", stop_timeout=10.0, start_timeout=30.0, kill_dependents=True, passthrough=False
    )


@patch("svcctl.cli.service.cmd_status")
@patch("svcctl.cli.service._handle_stage_result")
def test_status_passes_name(mock_handle_stage_result, mock_cmd_status):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(service(), ["status", "Alpha"])

    assert result.exit_code == 0
    mock_executor.assert_called_with("Alpha")


def test_service_without_command_shows_help():
    result = runner.invoke(service(), [])

    assert result.exit_code == 0


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "show"])

    assert result.exit_code == 1


def test_main_config_show_json(config_file, capsys):
    exit_code = main(["--display", "json", "config", "show", "timeouts"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["section"] == "timeouts"
    assert output["content"]["default_start_secs"] == 30.0


def test_main_config_show_yaml_failure(svcctl_home, capsys):
    exit_code = main(["config", "show", "service"])

    assert exit_code == 1
    output = yaml.safe_load(capsys.readouterr().out)
    assert "Configuration file not found" in output["errors"][0]


def test_main_service_start_invalid_timeout(config_file, capsys):
    exit_code = main(["-d", "json", "service", "start", "Alpha", "--timeout", "0"])

    assert exit_code == 1
    output = json.loads(capsys.readouterr().out)
    assert output["error_type"] == "InvalidTimeoutError"
    assert output["previous_status"] == ""
