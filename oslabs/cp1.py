"""Copy a file through memory maps of both files."""

from __future__ import annotations

import errno
import mmap
import os
import sys
from collections.abc import Sequence
from os import PathLike


def copy(source: str | PathLike[str], destination: str | PathLike[str]) -> None:
    """Copy ``source`` onto ``destination``, truncating or creating it."""
    with open(source, "rb") as src:
        size = os.fstat(src.fileno()).st_size
        with open(destination, "w+b") as dst:
            os.ftruncate(dst.fileno(), size)
            if size == 0:
                raise OSError(errno.EINVAL, "mmap: cannot map an empty file", str(source))
            with mmap.mmap(src.fileno(), size, access=mmap.ACCESS_READ) as src_map, \
                    mmap.mmap(dst.fileno(), size, access=mmap.ACCESS_WRITE) as dst_map:
                dst_map[:] = src_map[:]
                dst_map.flush()


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Cantidad de argumentos incorrecto", file=sys.stderr)
        return 1
    try:
        copy(args[0], args[1])
    except OSError as exc:
        print(f"{exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())