import os
import signal
import sys

from smallsh.config import DEV_NULL
from smallsh.redirection import INPUT, OUTPUT, apply_redirection
from smallsh.signals import setup_child_signals


def _exec_child(command):
    """
    Runs in the forked child. Never returns: either exec succeeds or
    the child exits with status 1.
    """
    setup_child_signals(command.background)

    input_path, output_path = command.input_path, command.output_path
    # background jobs must not read from or write to the terminal
    if command.background:
        input_path = input_path or DEV_NULL
        output_path = output_path or DEV_NULL

    if input_path and not apply_redirection(input_path, INPUT):
        os._exit(1)
    if output_path and not apply_redirection(output_path, OUTPUT):
        os._exit(1)

    try:
        os.execvp(command.name, command.arguments)
    except OSError as e:
        print(f"{command.name}: {e.strerror}", file=sys.stderr, flush=True)
    os._exit(1)


def run_external(command, state):
    """
    Fork and exec a non-builtin command.
    Foreground: wait for it and store its raw status in state.
    Background: record it in state.jobs and return immediately.
    Returns: child pid
    """
    # anything still buffered would be written twice after fork
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        pid = os.fork()
    except OSError as e:
        print(f"fork: {e.strerror}", file=sys.stderr, flush=True)
        sys.exit(1)

    if pid == 0:
        try:
            _exec_child(command)
        finally:
            os._exit(1)

    if command.background:
        print(f"PID {pid} started in background", flush=True)
        state.jobs.record(pid)
        return pid

    _, status = os.waitpid(pid, 0)
    state.last_foreground_status = status
    if os.WIFSIGNALED(status) and os.WTERMSIG(status) == signal.SIGINT:
        print(f"terminated by signal {int(signal.SIGINT)}", flush=True)
    return pid
