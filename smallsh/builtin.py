import os
import sys

from smallsh.config import HOME_VAR, NO_STATUS


def format_status(status):
    """Render a raw wait status the way `status` prints it"""
    if status is NO_STATUS:
        return "exit value 0"
    if os.WIFSIGNALED(status):
        return f"terminated by signal {os.WTERMSIG(status)}"
    return f"exit value {os.WEXITSTATUS(status)}"


def builtin_exit(state):
    """Kill background jobs and leave the shell"""
    state.jobs.kill_all()
    sys.exit(0)


def builtin_cd(args):
    """Change directory, $HOME when no argument is given"""
    if len(args) > 1:
        print("cd: too many arguments", file=sys.stderr, flush=True)
        return 1

    if args:
        path = args[0]
    else:
        path = os.environ.get(HOME_VAR)
        if not path:
            print(f"cd: {HOME_VAR} not set", file=sys.stderr, flush=True)
            return 1

    try:
        os.chdir(path)
        return 0
    except OSError as e:
        print(f"cd: {path}: {e.strerror}", file=sys.stderr, flush=True)
        return 1


def builtin_status(state):
    print(format_status(state.last_foreground_status), flush=True)
    return 0


def handle_builtin(command, state):
    """
    Run command if it is a builtin. Redirections and & are ignored here.
    Returns: True if the command was a builtin
    """
    builtins = {
        "exit": lambda: builtin_exit(state),
        "cd": lambda: builtin_cd(command.arguments[1:]),
        "status": lambda: builtin_status(state),
    }

    handler = builtins.get(command.name)
    if handler is None:
        return False
    handler()
    return True
