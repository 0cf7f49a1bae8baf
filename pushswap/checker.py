"""Command that checks whether a list of instructions sorts the numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence, TextIO

from .parse import ParseError, parse_arguments
from .stacks import Stacks, parse_op


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` with their newlines; the last may lack one."""
    yield from iter(stream.readline, "")


def check(values: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply each instruction line to ``values`` and report whether they end sorted.

    Every line must be an instruction name followed by a newline; anything
    else raises ValueError.
    """
    stacks = Stacks(values)
    for line in lines:
        if not line.endswith("\n"):
            raise ValueError(f"unterminated instruction: {line!r}")
        stacks.apply(parse_op(line[:-1]))
    return stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args, strict_signs=False)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    if not values:
        return 0
    try:
        ok = check(values, read_lines(sys.stdin))
    except ValueError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if ok else "KO\n")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())