"""Interactive shell: read a line, run it, repeat."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from typing import TextIO

from oslabs.builtins import ShellState
from oslabs.commands import EXIT_SHELL
from oslabs.lineinput import read_line
from oslabs.runcmd import CommandRunner


class Shell:
    """Reads command lines from ``stdin`` and runs them until exit or end of input."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        interactive: bool | None = None,
    ) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.interactive = interactive
        self.state = ShellState()
        self.runner = CommandRunner(self.state, stdout, interactive)

    def init_shell(self) -> None:
        """Move to $HOME and show it in the prompt."""
        home = os.environ.get("HOME", "")
        try:
            os.chdir(home)
        except OSError as exc:
            print(f"cannot cd to {home} : {exc.strerror}", file=sys.stderr)
        else:
            self.state.prompt = f"({home})"

    def _on_sigchld(self, signum: int, frame: object) -> None:
        self.runner.reap_background()

    def run(self) -> None:
        """Run command lines until ``exit`` or the end of input."""
        while True:
            self.runner.reap_background()
            line = read_line(self.state.prompt, self.stdin, self.stdout, self.interactive)
            if line is None:
                return
            if self.runner.run_cmd(line) == EXIT_SHELL:
                return


def main(argv: Sequence[str] | None = None) -> int:
    shell = Shell()
    shell.init_shell()
    previous = signal.signal(signal.SIGCHLD, shell._on_sigchld)
    try:
        shell.run()
    finally:
        signal.signal(signal.SIGCHLD, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())