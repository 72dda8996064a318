"""Reading command lines, with an optional prompt."""

from __future__ import annotations

import sys
from typing import TextIO

from oslabs.commands import COLOR_RED, COLOR_RESET


def read_line(
    prompt: str,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    interactive: bool | None = None,
) -> str | None:
    """Show the prompt when interactive and read one line without its newline.

    Return None at end of input, even if some text came before it.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    if interactive is None:
        interactive = stdout.isatty()
    if interactive:
        stdout.write(f"{COLOR_RED} {prompt} {COLOR_RESET}\n")
        stdout.write("$ ")
        stdout.flush()
    line = stdin.readline()
    if not line.endswith("\n"):
        return None
    return line[:-1]