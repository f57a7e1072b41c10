"""Command line: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments
from .sorting import sort_ascending
from .stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from the arguments and print the moves that sort them.

    The numbers may be given as separate arguments or as one string. Invalid
    input prints "Error" to standard error and returns 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if not values:
        return 1
    stacks = Stacks(values)
    sort_ascending(stacks)
    sys.stdout.write("".join(f"{move}\n" for move in stacks.moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())