"""Copy a file into a destination that must not exist yet."""

from __future__ import annotations

import shutil
import sys
from collections.abc import Sequence
from os import PathLike

BUFFER_SIZE = 4096


def copy_exclusive(source: str | PathLike[str], destination: str | PathLike[str]) -> None:
    """Copy ``source`` to ``destination``, failing if the destination exists."""
    with open(source, "rb") as src, open(destination, "xb") as dst:
        shutil.copyfileobj(src, dst, BUFFER_SIZE)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Cantidad de argumentos incorrecto", file=sys.stderr)
        return 1
    try:
        copy_exclusive(args[0], args[1])
    except OSError as exc:
        print(f"open: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())