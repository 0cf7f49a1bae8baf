"""Command that prints the operations sorting the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from .parse import ParseError, parse_arguments
from .sort import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input as ``Error``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args, strict_signs=True)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op.value}\n" for op in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())