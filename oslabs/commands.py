"""Parsed representation of shell command lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

BUFLEN = 1024
PRMTLEN = 1024
MAXARGS = 20

COLOR_BLUE = "\x1b[34m"
COLOR_RED = "\x1b[31m"
COLOR_RESET = "\x1b[0m"

EXIT_SHELL = 1
ERROR_STATUS = -1


class CommandType(IntEnum):
    """Kind of a parsed command."""

    EXEC = 1
    BACK = 2
    REDIR = 3
    PIPE = 4


@dataclass
class ExecCommand:
    """A single program to run, with its arguments, variables and redirections.

    Its type is EXEC, or REDIR once any redirection has been parsed.
    """

    scmd: str = ""
    argv: list[str] = field(default_factory=list)
    eargv: list[str] = field(default_factory=list)
    out_file: str = ""
    in_file: str = ""
    err_file: str = ""
    type: CommandType = CommandType.EXEC
    pid: int = 0

    @property
    def argc(self) -> int:
        """Number of program arguments."""
        return len(self.argv)

    @property
    def eargc(self) -> int:
        """Number of ``KEY=VALUE`` environment assignments."""
        return len(self.eargv)


@dataclass
class BackCommand:
    """A command to be run in the background."""

    c: ExecCommand
    pid: int = 0
    type: CommandType = field(default=CommandType.BACK, init=False)
    scmd: str = field(default="", init=False)

    def __post_init__(self) -> None:
        self.scmd = self.c.scmd


@dataclass
class PipeCommand:
    """Two commands joined so that the left one's output feeds the right one."""

    left: "Command | None"
    right: "Command"
    pid: int = 0
    scmd: str = ""
    type: CommandType = field(default=CommandType.PIPE, init=False)


Command = Union[ExecCommand, BackCommand, PipeCommand]


def pipe_command(left: Command | None, right: Command | None) -> Command | None:
    """Join ``left`` and ``right`` in a pipe; without a right side, return ``left``."""
    if right is None:
        return left
    return PipeCommand(left, right)