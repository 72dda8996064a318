"""Small string helpers for command-line parsing."""

from __future__ import annotations


def split_line(buf: str, splitter: str) -> tuple[str, str]:
    """Split ``buf`` at the first ``splitter``.

    Return the text before it and the text after it with leading spaces
    removed; the second part is empty when ``splitter`` does not occur.
    """
    left, found, right = buf.partition(splitter)
    if not found:
        return left, ""
    return left, right.lstrip(" ")


def block_contains(buf: str, c: str) -> int:
    """Return the index of the first ``c`` in ``buf``, or -1."""
    return buf.find(c)