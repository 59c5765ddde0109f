import os

import pytest

from ossim.forkdemo import ERROR_MESSAGE, main, spawn_child


def test_spawn_child_returns_pid_reported_by_fork(monkeypatch):
    monkeypatch.setattr(os, "fork", lambda: 4242)
    assert spawn_child() == 4242


def test_spawn_child_returns_zero_in_child(monkeypatch):
    monkeypatch.setattr(os, "fork", lambda: 0)
    assert spawn_child() == 0


def test_spawn_child_failure_raises(monkeypatch):
    def refuse():
        raise OSError("no more processes")

    monkeypatch.setattr(os, "fork", refuse)
    with pytest.raises(OSError):
        spawn_child()


def test_main_parent_reports_own_pid(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"the parent process ID is {os.getpid()}" in out


def test_main_reports_creation_error(monkeypatch, capsys):
    def refuse():
        raise OSError("no more processes")

    monkeypatch.setattr(os, "fork", refuse)
    assert main([]) == 1
    assert ERROR_MESSAGE.strip() in capsys.readouterr().out