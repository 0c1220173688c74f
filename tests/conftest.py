"""Shared pytest configuration and fixtures for all tests."""

import json
import platform

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no OS service manager")
    config.addinivalue_line("markers", "service: lifecycle controller tests")
    config.addinivalue_line("markers", "config: configuration loading and validation")
    config.addinivalue_line("markers", "log: unified logfile")
    config.addinivalue_line("markers", "cli: typer command-line interface")


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def service_config_dict_for_platform() -> dict:
    """Service backend section for the current platform.

    Falls back to linux on other platforms: unit tests never reach a real service manager.
    """
    if platform.system().lower() == "windows":
        return {"type": "windows", "data": {"sc_path": "sc.exe"}}
    return {"type": "linux", "data": {"scope": "user", "systemctl": "systemctl"}}


def minimal_config_dict() -> dict:
    """Minimal valid svcctl configuration dict for testing."""
    return {
        "service": service_config_dict_for_platform(),
        "timeouts": {
            "min_secs": 0.5,
            "max_secs": 300.0,
            "default_start_secs": 30.0,
            "default_stop_secs": 10.0,
            "escalation_settle_secs": 5.0,
            "restart_settle_secs": 1.0,
            "poll_interval_secs": 0.1,
        },
        "log": {
            "level": "DEBUG",
            "debug_retention_days": 0.5,
            "info_retention_days": 1.0,
            "warning_retention_days": 2.0,
            "error_retention_days": 7.0,
        },
    }


@pytest.fixture
def svcctl_home(tmp_path, monkeypatch):
    """Point SVCCTL_HOME at a temporary directory."""
    home = tmp_path / ".svcctl"
    home.mkdir()
    monkeypatch.setenv("SVCCTL_HOME", str(home))
    return home


@pytest.fixture
def config_file(svcctl_home):
    """Write a minimal config.json under SVCCTL_HOME and return its path."""
    path = svcctl_home / "config.json"
    path.write_text(json.dumps(minimal_config_dict()), encoding="utf-8")
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
