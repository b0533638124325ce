import os
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Command:
    """One parsed input line"""
    arguments: List[str] = field(default_factory=list)
    input_path: Optional[str] = None
    output_path: Optional[str] = None
    background: bool = False

    @property
    def name(self):
        return self.arguments[0]


def expand_pid(line, pid=None):
    """
    Replace every "$$" pair with the shell's pid.
    A lone "$" is kept, so "$$$" becomes "<pid>$".
    """
    if pid is None:
        pid = os.getpid()
    pid_text = str(pid)

    out = []
    i = 0
    while i < len(line):
        if line[i] == "$" and i + 1 < len(line) and line[i + 1] == "$":
            out.append(pid_text)
            i += 2
        else:
            out.append(line[i])
            i += 1
    return "".join(out)


def tokenize(line):
    """Split on runs of whitespace, no quoting."""
    return line.split()


def parse_command(line, foreground_only=False, pid=None):
    """
    Parse a raw line (newline already stripped) into a Command.
    Returns: Command, or None for blank and comment lines
    """
    tokens = tokenize(expand_pid(line, pid))
    if not tokens or tokens[0].startswith("#"):
        return None

    background = False
    if tokens[-1] == "&":
        background = True
        tokens = tokens[:-1]

    args, input_path, output_path = [], None, None
    seen_redirect = False
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok in ("<", ">"):
            seen_redirect = True
            target = tokens[i + 1] if i + 1 < len(tokens) else None
            # first occurrence of each operator wins
            if tok == "<" and input_path is None:
                input_path = target
            elif tok == ">" and output_path is None:
                output_path = target
            i += 2
            continue
        if not seen_redirect:
            args.append(tok)
        i += 1

    if not args:
        return None

    if foreground_only:
        background = False

    return Command(args, input_path, output_path, background)
