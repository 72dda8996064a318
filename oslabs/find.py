"""Recursively list the entries whose name contains a search string."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Sequence
from os import PathLike

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def matches(file_name: str, target: str, case_sensitive: bool) -> bool:
    """Tell whether ``target`` occurs in ``file_name``."""
    if case_sensitive:
        return target in file_name
    return target.translate(_ASCII_LOWER) in file_name.translate(_ASCII_LOWER)


def search_files(
    root: str | PathLike[str], dir_path: str, target: str, case_sensitive: bool
) -> Iterator[str]:
    """Yield ``dir_path/name`` for every matching entry below ``root``.

    Subdirectories are searched before their own name is checked; symbolic
    links are not followed.
    """
    with os.scandir(root) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                yield from search_files(
                    entry.path, f"{dir_path}/{entry.name}", target, case_sensitive
                )
            if matches(entry.name, target, case_sensitive):
                yield f"{dir_path}/{entry.name}"


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not 1 <= len(args) <= 2:
        print("Argumentos incorrectos", file=sys.stderr)
        if not args:
            return 1
    case_sensitive = True
    if len(args) == 2:
        if args[0] != "-i":
            print(f"Opción no reconocida: {args[0]}")
            return 1
        case_sensitive = False
    try:
        for path in search_files(".", ".", args[-1], case_sensitive):
            print(path)
    except OSError as exc:
        print(f"opendir: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())