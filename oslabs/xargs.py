"""Run a command with arguments read from standard input, a few at a time."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

NARGS = 4


def strip_newline(line: str) -> str:
    """Remove a single trailing newline, if present."""
    return line[:-1] if line.endswith("\n") else line


def batches(lines: Iterable[str], size: int) -> Iterator[list[str]]:
    """Group ``lines`` into lists of ``size``.

    A final batch holding whatever is left is always produced, even when it
    is empty.
    """
    batch: list[str] = []
    for line in lines:
        batch.append(line)
        if len(batch) == size:
            yield batch
            batch = []
    yield batch


def run_command(args: Sequence[str]) -> int:
    """Run ``args`` and wait for it to finish, returning its exit status."""
    try:
        return subprocess.run(list(args), check=False).returncode
    except OSError as exc:
        print(f"cannot exec {args[0]}: {exc.strerror}", file=sys.stderr)
        return 127


def xargs(
    command: str,
    lines: Iterable[str],
    runner: Callable[[list[str]], object] = run_command,
) -> None:
    """Run ``command`` once per batch of up to NARGS input lines."""
    for batch in batches((strip_newline(line) for line in lines), NARGS):
        runner([command, *batch])


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("No ingreso los argumentos correctos", file=sys.stderr)
        return 1
    xargs(args[0], sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())