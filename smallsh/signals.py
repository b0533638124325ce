"""
Signal dispositions and foreground-only mode.

The SIGTSTP handler only flips flags on a SignalState; the shell loop reads
them back between commands and prints the banner itself. Python runs handlers
in the main thread between bytecodes, so the flags need no lock.
"""
import signal

from smallsh.config import ENTER_FG_ONLY, EXIT_FG_ONLY


class ReadInterrupted(Exception):
    """Raised out of a blocked prompt read when SIGTSTP arrives"""


class SignalState:
    """Foreground-only mode flags shared between the SIGTSTP handler and the loop"""

    def __init__(self):
        self.foreground_only = False
        self.mode_just_changed = False
        # True only while the loop is blocked reading a line
        self.reading = False

    def handle_sigtstp(self, signum, frame):
        self.foreground_only = not self.foreground_only
        self.mode_just_changed = True
        if self.reading:
            self.reading = False
            raise ReadInterrupted()

    def consume_mode_change(self):
        """
        Return the banner for the last toggle, once.
        Returns: banner string, or None if the mode did not change
        """
        if not self.mode_just_changed:
            return None
        self.mode_just_changed = False
        return ENTER_FG_ONLY if self.foreground_only else EXIT_FG_ONLY


def init_signal_handlers(state):
    """Shell process: ignore Ctrl+C, Ctrl+Z toggles foreground-only mode"""
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    signal.signal(signal.SIGTSTP, state.handle_sigtstp)


def setup_child_signals(background):
    """
    Dispositions for a freshly forked child, before exec.
    Children never stop on Ctrl+Z; only foreground children die on Ctrl+C.
    """
    signal.signal(signal.SIGTSTP, signal.SIG_IGN)
    if background:
        signal.signal(signal.SIGINT, signal.SIG_IGN)
    else:
        signal.signal(signal.SIGINT, signal.SIG_DFL)
