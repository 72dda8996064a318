"""Running one command line: built-ins first, then programs."""

from __future__ import annotations

import sys
from typing import TextIO

from oslabs.builtins import ShellState, cd, exit_shell, history, pwd
from oslabs.commands import EXIT_SHELL, Command, CommandType
from oslabs.execution import FAILED_STATUS, ExecutionError, Process, spawn
from oslabs.parsing import parse_line
from oslabs.printstatus import print_back_info, print_status_info


def _wait(cmd: Command, processes: list[Process]) -> int:
    codes = [process.wait() for process in processes]
    if not codes:
        return 0
    if cmd.type == CommandType.PIPE and codes[-1] < 0:
        return FAILED_STATUS
    return codes[-1]


class CommandRunner:
    """Runs command lines and keeps track of the latest background command."""

    def __init__(
        self,
        state: ShellState | None = None,
        out: TextIO | None = None,
        interactive: bool | None = None,
    ) -> None:
        self.state = ShellState() if state is None else state
        self.out = sys.stdout if out is None else out
        self.interactive = interactive
        self.background: tuple[Command, list[Process]] | None = None

    def run_cmd(self, cmd: str) -> int:
        """Run ``cmd``; return EXIT_SHELL when the shell should stop, else 0."""
        if not cmd:
            return 0
        if history(cmd):
            return 0
        if cd(cmd, self.state):
            return 0
        if exit_shell(cmd):
            return EXIT_SHELL
        if pwd(cmd, self.out):
            return 0

        parsed = parse_line(cmd, self.state.status)
        if parsed is None:
            return 0

        try:
            processes = spawn(parsed)
        except ExecutionError as exc:
            print(exc.strerror, file=sys.stderr)
            self.state.status = print_status_info(
                parsed, FAILED_STATUS, self.out, self.interactive
            )
            return 0

        parsed.pid = processes[0].pid if processes else 0

        if parsed.type == CommandType.BACK:
            print_back_info(parsed, self.out, self.interactive)
            self.background = (parsed, processes)
            return 0

        returncode = _wait(parsed, processes)
        self.state.status = print_status_info(
            parsed, returncode, self.out, self.interactive
        )
        return 0

    def reap_background(self) -> bool:
        """Report the background command if it has finished; tell whether it had."""
        if self.background is None:
            return False
        cmd, processes = self.background
        returncode = processes[0].poll() if processes else 0
        if returncode is None:
            return False
        self.background = None
        self.state.status = print_status_info(
            cmd, returncode, self.out, self.interactive
        )
        return True