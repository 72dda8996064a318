"""Prime sieve built as a chain of filtering stages."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence


def generate_numbers(limit: int) -> Iterator[int]:
    """Yield every integer from 2 up to and including ``limit``."""
    yield from range(2, limit + 1)


def filter_multiples(numbers: Iterable[int], prime: int) -> Iterator[int]:
    """Yield the numbers that are not multiples of ``prime``."""
    return (number for number in numbers if number % prime != 0)


def primes_up_to(limit: int) -> Iterator[int]:
    """Yield the primes up to ``limit``.

    Each stage takes the first number it receives as a prime and passes on
    only the numbers that prime does not divide.
    """
    remaining = list(generate_numbers(limit))
    while remaining:
        prime, *rest = remaining
        yield prime
        remaining = list(filter_multiples(rest, prime))


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way, returning 0 if there is none."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isascii() or not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("No ingreso el tope requerido", file=sys.stderr)
        return 1
    limit = _atoi(args[0])
    if limit < 2:
        print("Tope invalido", file=sys.stderr)
        return 1
    for prime in primes_up_to(limit):
        print(f"primo {prime}", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())