"""Starting parsed commands as processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Mapping
from contextlib import ExitStack
from dataclasses import dataclass
from typing import IO, Union

from oslabs.commands import BackCommand, Command, CommandType, ExecCommand, PipeCommand

# Status a parent sees when a child gives up with exit(-1).
FAILED_STATUS = 255

Stream = Union[None, int, IO]


class ExecutionError(OSError):
    """A command could not be started; ``strerror`` holds the message to show."""


@dataclass
class _FailedProcess:
    """Stands in for a pipe member that could not be started."""

    pid: int = 0
    returncode: int = FAILED_STATUS

    def wait(self) -> int:
        return self.returncode

    def poll(self) -> int:
        return self.returncode


Process = Union[subprocess.Popen, _FailedProcess]


def split_environ(arg: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` assignment at its first ``=``."""
    key, found, value = arg.partition("=")
    if not found:
        raise ValueError(f"not a KEY=VALUE assignment: {arg!r}")
    return key, value


def build_environ(
    eargv: Iterable[str], base: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Return ``base`` (the current environment by default) with the assignments applied.

    Entries without ``=`` are ignored.
    """
    env = dict(os.environ if base is None else base)
    for arg in eargv:
        try:
            key, value = split_environ(arg)
        except ValueError:
            continue
        env[key] = value
    return env


def _open_redir(path: str, flags: int, stack: ExitStack) -> int:
    try:
        fd = os.open(path, flags | os.O_CLOEXEC, 0o600)
    except OSError as exc:
        raise ExecutionError(
            exc.errno, f"Error opening file {path}: {exc.strerror}", path
        ) from exc
    stack.callback(os.close, fd)
    return fd


def _exec(
    cmd: ExecCommand, stdin: Stream, stdout: Stream, stderr: Stream, new_group: bool
) -> list[Process]:
    with ExitStack() as stack:
        if cmd.in_file:
            stdin = _open_redir(cmd.in_file, os.O_RDONLY, stack)
        if cmd.out_file:
            stdout = _open_redir(
                cmd.out_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, stack
            )
        if cmd.err_file == "&1":
            stderr = subprocess.STDOUT
        elif cmd.err_file:
            stderr = _open_redir(
                cmd.err_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, stack
            )
        if not cmd.argv:
            return []
        try:
            process = subprocess.Popen(
                cmd.argv,
                stdin=stdin,
                stdout=stdout,
                stderr=stderr,
                env=build_environ(cmd.eargv),
                preexec_fn=os.setpgrp if new_group else None,
            )
        except OSError as exc:
            raise ExecutionError(
                exc.errno,
                f"cannot exec file {cmd.argv[0]} : {exc.strerror}",
                cmd.argv[0],
            ) from exc
        return [process]


def _pipe_member(
    cmd: Command | None, stdin: Stream, stdout: Stream, stderr: Stream, new_group: bool
) -> list[Process]:
    if cmd is None:
        return [_FailedProcess()]
    try:
        return _spawn(cmd, stdin, stdout, stderr, new_group)
    except ExecutionError as exc:
        print(exc.strerror, file=sys.stderr)
        return [_FailedProcess()]


def _pipe(
    cmd: PipeCommand, stdin: Stream, stdout: Stream, stderr: Stream, new_group: bool
) -> list[Process]:
    read_fd, write_fd = os.pipe()
    try:
        processes = _pipe_member(cmd.left, stdin, write_fd, stderr, new_group)
    finally:
        os.close(write_fd)
    try:
        processes += _pipe_member(cmd.right, read_fd, stdout, stderr, new_group)
    finally:
        os.close(read_fd)
    return processes


def _spawn(
    cmd: Command, stdin: Stream, stdout: Stream, stderr: Stream, new_group: bool
) -> list[Process]:
    if isinstance(cmd, BackCommand):
        return _spawn(cmd.c, stdin, stdout, stderr, True)
    if isinstance(cmd, PipeCommand):
        return _pipe(cmd, stdin, stdout, stderr, new_group)
    return _exec(cmd, stdin, stdout, stderr, new_group)


def spawn(
    cmd: Command,
    stdin: Stream = None,
    stdout: Stream = None,
    stderr: Stream = None,
) -> list[Process]:
    """Start every process of ``cmd`` without waiting; the last one decides the status.

    Background commands get a process group of their own. A command with no
    program only performs its redirections and starts nothing.
    """
    return _spawn(cmd, stdin, stdout, stderr, False)


def run(cmd: Command) -> int:
    """Run ``cmd`` to completion and return its status.

    A pipe whose last member did not exit normally reports FAILED_STATUS.
    """
    processes = spawn(cmd)
    codes = [process.wait() for process in processes]
    if not codes:
        return 0
    if cmd.type == CommandType.PIPE and codes[-1] < 0:
        return FAILED_STATUS
    return codes[-1]