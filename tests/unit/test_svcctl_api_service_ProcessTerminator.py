"""Unit tests for svcctl.api.service.ProcessTerminator."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import psutil
import pytest

from svcctl.api.service import ProcessTerminator as terminator_module
from svcctl.api.service.ProcessTerminator import ProcessTerminator
from svcctl.api.service.ServiceError import OperationFailedError

pytestmark = pytest.mark.service


@pytest.mark.parametrize("pid", [0, -1])
def test_kill_rejects_invalid_pid(pid):
    with pytest.raises(OperationFailedError, match="invalid process ID"):
        ProcessTerminator().kill(pid)


def test_kill_terminates_process(monkeypatch):
    process = MagicMock()
    monkeypatch.setattr(terminator_module.psutil, "Process", lambda pid: process)

    assert ProcessTerminator().kill(4321) is True
    process.kill.assert_called_once_with()


def test_kill_already_exited_process(monkeypatch):
    def gone(pid):
        raise psutil.NoSuchProcess(pid)

    monkeypatch.setattr(terminator_module.psutil, "Process", gone)

    assert ProcessTerminator().kill(4321) is False


def test_kill_access_denied(monkeypatch):
    process = MagicMock()
    process.kill.side_effect = psutil.AccessDenied(4321)
    monkeypatch.setattr(terminator_module.psutil, "Process", lambda pid: process)

    with pytest.raises(OperationFailedError, match="Access denied killing process 4321"):
        ProcessTerminator().kill(4321)


def _processes(*pairs):
    return [SimpleNamespace(info={"pid": pid, "name": name}) for pid, name in pairs]


def test_find_pid_by_exact_name(monkeypatch):
    procs = _processes((1, "systemd"), (200, "nginx"), (300, "nginx-helper"))
    monkeypatch.setattr(terminator_module.psutil, "process_iter", lambda attrs: iter(procs))

    assert ProcessTerminator().find_pid_by_exact_name("nginx") == 200


def test_find_pid_by_exact_name_is_case_sensitive(monkeypatch):
    procs = _processes((200, "Nginx"))
    monkeypatch.setattr(terminator_module.psutil, "process_iter", lambda attrs: iter(procs))

    assert ProcessTerminator().find_pid_by_exact_name("nginx") is None


def test_find_pid_by_exact_name_refuses_ambiguous_match(monkeypatch):
    procs = _processes((200, "worker"), (201, "worker"))
    monkeypatch.setattr(terminator_module.psutil, "process_iter", lambda attrs: iter(procs))

    with pytest.raises(OperationFailedError, match="2 processes are named 'worker'"):
        ProcessTerminator().find_pid_by_exact_name("worker")
