"""Commands the shell carries out itself."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass
class ShellState:
    """Mutable shell state: the prompt text and the last exit status."""

    prompt: str = ""
    status: int = 0


def exit_shell(cmd: str) -> bool:
    """Tell whether ``cmd`` asks the shell to exit."""
    return cmd == "exit"


def cd(cmd: str, state: ShellState) -> bool:
    """Change directory if ``cmd`` is a ``cd`` command; tell whether it was.

    ``cd`` alone goes to $HOME. On success the prompt shows the new directory;
    on failure an error is printed and the prompt is left alone.
    """
    if cmd[:2] != "cd":
        return False
    if len(cmd) == 2:
        directory = os.environ.get("HOME", "")
    elif cmd[2:4] == " $":
        directory = cmd[4:]
    else:
        directory = cmd[3:]
    try:
        os.chdir(directory)
    except OSError as exc:
        print(f"cannot cd to {directory} : {exc.strerror}", file=sys.stderr)
    else:
        state.prompt = f"({os.getcwd()})"
    return True


def pwd(cmd: str, out: TextIO | None = None) -> bool:
    """Print the working directory if ``cmd`` is ``pwd``; tell whether it was."""
    if cmd != "pwd":
        return False
    (out or sys.stdout).write(f"{os.getcwd()}\n")
    return True


def history(cmd: str) -> bool:
    """Tell whether ``cmd`` is ``history``.

    No history is kept, so handling the command shows nothing.
    """
    return cmd.strip() == "history"