"""Command that prints the operations sorting the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ArgumentError, parse_arguments
from .sorter import sort_operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{operation}\n" for operation in sort_operations(values)))
    return 0