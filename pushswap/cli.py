"""Command-line entry point: check the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.ranking import fill_stack, is_sorted
from pushswap.validation import ArgumentError


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the arguments and return the exit status.

    Invalid input writes ``Error`` to standard error and gives status 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        ranks = fill_stack(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    if is_sorted(ranks):
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())