import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from smallsh.builtin import builtin_exit, handle_builtin
from smallsh.config import NO_STATUS, PROMPT
from smallsh.executor import run_external
from smallsh.job_control import JobTable
from smallsh.parser import parse_command
from smallsh.signals import ReadInterrupted, SignalState, init_signal_handlers


@dataclass
class ShellState:
    """Everything the shell keeps between prompts"""
    signals: SignalState = field(default_factory=SignalState)
    jobs: JobTable = field(default_factory=JobTable)
    last_foreground_status: Optional[int] = NO_STATUS
    pid: int = field(default_factory=os.getpid)


def read_line(state, stdin):
    """
    Block for one line of input.
    Returns: the line without its newline, "" for a blank line, None at EOF
    Raises ReadInterrupted / InterruptedError when a signal cuts the read short.
    """
    line = None
    state.signals.reading = True
    try:
        line = stdin.readline()
        state.signals.reading = False
    except ReadInterrupted:
        # signal landed after the line was read, keep it
        if line is None:
            raise
    finally:
        state.signals.reading = False
    if not line:
        return None
    return line.rstrip("\n")


def run_once(state, stdin=None):
    """One pass: announce mode change, reap, prompt, read, parse, dispatch"""
    if stdin is None:
        stdin = sys.stdin

    banner = state.signals.consume_mode_change()
    if banner:
        print(banner, flush=True)

    state.jobs.reap_all()

    print(PROMPT, end="", flush=True)
    try:
        line = read_line(state, stdin)
    except (ReadInterrupted, InterruptedError):
        print(flush=True)
        return

    if line is None:
        # end of input behaves like exit
        print(flush=True)
        builtin_exit(state)

    command = parse_command(line, state.signals.foreground_only, state.pid)
    if command is None:
        return

    if handle_builtin(command, state):
        return
    run_external(command, state)


def main_loop(state=None):
    """Main shell loop, only exit (or EOF) ends it"""
    state = state or ShellState()
    init_signal_handlers(state.signals)
    while True:
        run_once(state)


def main():
    main_loop()


if __name__ == "__main__":
    main()
