"""Unit tests for svcctl.api.config (SvcctlConfig, TimeoutConfig, LogConfig, cmd_show)."""

import json

import pytest
from pydantic import ValidationError

from svcctl.api.config.cmd_show import cmd_show
from svcctl.api.config.get_home_dir import get_home_dir
from svcctl.api.config.LogConfig import LogConfig
from svcctl.api.config.SvcctlConfig import SvcctlConfig
from svcctl.api.config.TimeoutConfig import TimeoutConfig
from svcctl.api.service._linux._Data import _Data as LinuxData
from tests.unit.conftest import minimal_config_dict, run_cmd

pytestmark = pytest.mark.config


def test_get_home_dir_uses_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SVCCTL_HOME", str(tmp_path / "custom"))

    assert get_home_dir() == (tmp_path / "custom").resolve()
    assert get_home_dir("config.json") == (tmp_path / "custom").resolve() / "config.json"


def test_get_home_dir_defaults_under_home(monkeypatch, tmp_path):
    monkeypatch.delenv("SVCCTL_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_home_dir() == tmp_path / ".svcctl"


def test_load_valid_config(config_file):
    config = SvcctlConfig.load()

    assert config.timeouts.min_secs == 0.5
    assert config.log.level == "DEBUG"


def test_load_applies_defaults_for_optional_sections(svcctl_home):
    (svcctl_home / "config.json").write_text(json.dumps({"service": {"type": "linux"}}))

    config = SvcctlConfig.load()

    assert isinstance(config.service.data, LinuxData)
    assert config.service.data.scope == "system"
    assert config.timeouts == TimeoutConfig()
    assert config.log == LogConfig()


def test_load_missing_file(svcctl_home):
    with pytest.raises(ValueError, match="Configuration file not found"):
        SvcctlConfig.load()


def test_load_invalid_json(svcctl_home):
    (svcctl_home / "config.json").write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        SvcctlConfig.load()


def test_load_reports_failing_field(svcctl_home):
    data = minimal_config_dict()
    data["timeouts"]["min_secs"] = 500
    (svcctl_home / "config.json").write_text(json.dumps(data))

    with pytest.raises(ValueError, match="Configuration validation error"):
        SvcctlConfig.load()


def test_unknown_service_type_rejected():
    with pytest.raises(ValidationError, match="Unknown service type"):
        SvcctlConfig(service={"type": "launchd"})


def test_save_then_load(svcctl_home):
    config = SvcctlConfig(**minimal_config_dict())
    config.save()

    assert SvcctlConfig.load().to_dict() == config.to_dict()
    assert not (svcctl_home / "config.json.tmp").exists()


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_secs": 10, "max_secs": 5},
        {"default_start_secs": 400},
        {"default_stop_secs": 0.5},
        {"poll_interval_secs": 0},
        {"unknown": 1},
    ],
)
def test_timeout_config_rejects_inconsistent_values(overrides):
    with pytest.raises(ValidationError):
        TimeoutConfig(**overrides)


def test_timeout_config_defaults():
    timeouts = TimeoutConfig()

    assert (timeouts.min_secs, timeouts.max_secs) == (1.0, 300.0)
    assert timeouts.default_start_secs == 30.0
    assert timeouts.default_stop_secs == 10.0
    assert timeouts.escalation_settle_secs == 5.0
    assert timeouts.restart_settle_secs == 1.0


def test_log_config_level_threshold():
    config = LogConfig(level="WARN")

    assert config.enabled("ERROR") is True
    assert config.enabled("WARN") is True
    assert config.enabled("INFO") is False


def test_cmd_show_lists_sections(config_file):
    result = run_cmd(cmd_show)

    assert result.success is True
    assert result.output["content"] == {"sections": ["service", "timeouts", "log"]}


def test_cmd_show_section(config_file):
    result = run_cmd(cmd_show, "timeouts")

    assert result.success is True
    assert result.output["content"]["default_stop_secs"] == 10.0
    assert result.output["config_path"] == str(config_file.resolve())


def test_cmd_show_unknown_section(config_file):
    result = run_cmd(cmd_show, "daemon")

    assert result.success is False
    assert result.output["errors"] == ["Unknown section: daemon"]


def test_cmd_show_without_config(svcctl_home):
    result = run_cmd(cmd_show, "service")

    assert result.success is False
    assert "Configuration file not found" in result.output["errors"][0]
