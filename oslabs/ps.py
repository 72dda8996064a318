"""List the running processes with their pid and command name."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike

PROC_ROOT = "/proc"
COMM_LENGTH = 32


def remove_end_of_line(text: str) -> str:
    """Remove a single trailing newline, if present."""
    return text[:-1] if text.endswith("\n") else text


def process_status(proc_root: str | PathLike[str] = PROC_ROOT) -> Iterator[tuple[str, str]]:
    """Yield ``(pid, command)`` for every process directory under ``proc_root``."""
    with os.scandir(proc_root) as entries:
        for entry in entries:
            if not entry.is_dir(follow_symlinks=False):
                continue
            if entry.name[:1] not in "0123456789" or not entry.name:
                continue
            try:
                with open(os.path.join(entry.path, "comm"), "rb") as comm:
                    raw = comm.read(COMM_LENGTH)
            except OSError:
                continue
            name = raw.decode(errors="replace")
            yield entry.name, remove_end_of_line(name)


def format_table(processes: Iterable[tuple[str, str]]) -> str:
    """Render processes as a PID/COMMAND table."""
    rows = [f"{'PID':>6} COMMAND"]
    rows.extend(f"{pid:>6} {name}" for pid, name in processes)
    return "".join(f"{row}\n" for row in rows)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        table = format_table(process_status(PROC_ROOT))
    except OSError as exc:
        print(f"opendir: {exc.strerror}", file=sys.stderr)
        return 1
    sys.stdout.write(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())