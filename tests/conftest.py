"""
Pytest configuration and shared fixtures for smallsh tests.

Provides:
- A fresh ShellState with a fixed fake pid
- Helpers to run code in a forked child and collect its wait status
"""

import os
import signal

import pytest

from smallsh.job_control import JobTable
from smallsh.shell import ShellState
from smallsh.signals import SignalState


FAKE_PID = 4242


@pytest.fixture
def shell_state():
    """ShellState whose $$ expands to FAKE_PID."""
    return ShellState(signals=SignalState(), jobs=JobTable(), pid=FAKE_PID)


@pytest.fixture
def in_tmp_cwd(tmp_path):
    """Run the test inside tmp_path and restore the working directory after."""
    old = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(old)


@pytest.fixture
def restore_signals():
    """Put SIGINT / SIGTSTP back the way pytest had them."""
    saved = {
        signal.SIGINT: signal.getsignal(signal.SIGINT),
        signal.SIGTSTP: signal.getsignal(signal.SIGTSTP),
    }
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def run_in_child(func):
    """
    Fork, call func() in the child and exit with its return value.
    Returns: the child's raw wait status
    """
    pid = os.fork()
    if pid == 0:
        code = 1
        try:
            code = func()
        finally:
            os._exit(code if isinstance(code, int) else 0)
    _, status = os.waitpid(pid, 0)
    return status


@pytest.fixture
def child_runner():
    return run_in_child
