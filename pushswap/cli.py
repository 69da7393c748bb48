"""Command that prints instructions sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorter import sort_operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line that sorts the numbers in the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        operations = sort_operations(parse_arguments(args))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())