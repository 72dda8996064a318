"""Reporting how commands finished."""

from __future__ import annotations

import sys
from typing import TextIO

from oslabs.commands import COLOR_BLUE, COLOR_RESET, Command, CommandType


def decode_status(returncode: int) -> tuple[str, int]:
    """Turn a process return code into an action word and the status to report.

    A negative code means the process was killed by that signal.
    """
    if returncode >= 0:
        return "exited", returncode
    return "killed", returncode


def print_status_info(
    cmd: Command,
    returncode: int,
    out: TextIO | None = None,
    interactive: bool | None = None,
) -> int:
    """Report how ``cmd`` finished and return the status for ``$?``.

    Nothing is printed for pipes or for commands with no text.
    """
    out = sys.stdout if out is None else out
    action, status = decode_status(returncode)
    if not cmd.scmd or cmd.type == CommandType.PIPE:
        return status
    if interactive is None:
        interactive = out.isatty()
    if interactive:
        out.write(
            f"{COLOR_BLUE}\tProgram [PID={cmd.pid}]: [{cmd.scmd}] "
            f"{action}, status: {status} {COLOR_RESET}\n"
        )
    return status


def print_back_info(
    cmd: Command, out: TextIO | None = None, interactive: bool | None = None
) -> None:
    """Report the pid of a command started in the background."""
    out = sys.stdout if out is None else out
    if interactive is None:
        interactive = out.isatty()
    if interactive:
        out.write(f"{COLOR_BLUE}  [PID={cmd.pid}] {COLOR_RESET}\n")