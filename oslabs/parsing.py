"""Turn a command line into a tree of commands."""

from __future__ import annotations

import os

from oslabs.commands import (
    BackCommand,
    Command,
    CommandType,
    ExecCommand,
    pipe_command,
)
from oslabs.textutils import block_contains, split_line


def _tokens(buf: str) -> list[str]:
    """Split at single spaces; a trailing empty token is dropped."""
    parts = buf.split(" ")
    if parts[-1] == "":
        parts.pop()
    return parts


def _parse_redir_flow(cmd: ExecCommand, arg: str) -> bool:
    out_idx = block_contains(arg, ">")
    if out_idx >= 0:
        if out_idx == 0:
            cmd.out_file = arg[1:]
        elif out_idx == 1:
            cmd.err_file = arg[out_idx + 1 :]
        cmd.type = CommandType.REDIR
        return True
    if block_contains(arg, "<") >= 0:
        cmd.in_file = arg[1:]
        cmd.type = CommandType.REDIR
        return True
    return False


def _parse_environ_var(cmd: ExecCommand, arg: str) -> bool:
    # A '-' means an option such as --arg=value rather than an assignment.
    if block_contains(arg, "=") > 0 and block_contains(arg, "-") < 0:
        cmd.eargv.append(arg)
        return True
    return False


def expand_environ_var(arg: str, status: int = 0) -> str | None:
    """Expand a ``$NAME`` or ``$?`` token; None when the value is unset or empty."""
    if not arg.startswith("$"):
        return arg
    if arg[1:2] == "?":
        value: str | None = str(status)
    else:
        name = arg[1:]
        value = os.environ.get(name) if name else None
    return value or None


def parse_exec(buf_cmd: str, status: int = 0) -> ExecCommand:
    """Parse a single command with its arguments, variables and redirections."""
    cmd = ExecCommand(scmd=buf_cmd)
    for token in _tokens(buf_cmd):
        if _parse_redir_flow(cmd, token):
            continue
        if _parse_environ_var(cmd, token):
            continue
        expanded = expand_environ_var(token, status)
        if expanded is not None:
            cmd.argv.append(expanded)
    return cmd


def parse_cmd(buf_cmd: str, status: int = 0) -> Command | None:
    """Parse one command, running it in the background when it holds ``&``.

    An ``&`` right after ``>`` belongs to a redirection instead.
    """
    if not buf_cmd:
        return None
    idx = block_contains(buf_cmd, "&")
    if idx >= 0 and (idx == 0 or buf_cmd[idx - 1] != ">"):
        return BackCommand(parse_exec(buf_cmd[:idx], status))
    return parse_exec(buf_cmd, status)


def parse_line(line: str, status: int = 0) -> Command | None:
    """Parse a whole command line, splitting it into pipes at ``|``."""
    left_text, right_text = split_line(line, "|")
    left = parse_cmd(left_text, status)
    if not right_text:
        return left
    return pipe_command(left, parse_line(right_text, status))