"""
File descriptor redirection for spawned children.

These helpers replace fd 0 / fd 1 of the *current* process, so they are only
called in a forked child right before exec. Errors are printed and reported
through the return value; the caller decides to exit.
"""
import os
import sys

from smallsh.config import OUTPUT_FILE_MODE

INPUT = "input"
OUTPUT = "output"


def _redirect(path, flags, target_fd, mode=0o666):
    try:
        fd = os.open(path, flags, mode)
    except OSError as e:
        print(f"{path}: {e.strerror}", file=sys.stderr, flush=True)
        return False

    try:
        os.dup2(fd, target_fd)
    except OSError as e:
        print(f"{path}: {e.strerror}", file=sys.stderr, flush=True)
        return False
    finally:
        os.close(fd)
    return True


def redirect_input(path):
    """Point stdin at path (read only). Returns False on error."""
    return _redirect(path, os.O_RDONLY, 0)


def redirect_output(path):
    """Point stdout at path, created or truncated with mode 0644. Returns False on error."""
    return _redirect(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 1, OUTPUT_FILE_MODE)


def apply_redirection(path, direction):
    if direction == INPUT:
        return redirect_input(path)
    if direction == OUTPUT:
        return redirect_output(path)
    raise ValueError(f"unknown redirection direction: {direction}")
