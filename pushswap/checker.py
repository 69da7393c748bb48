"""Reading instructions and telling whether they sort the given numbers."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence

from pushswap.parsing import InputError, check_duplicates, parse_arguments
from pushswap.stacks import Operation, Stacks

_LINE = re.compile(r"[^\n]*\n|[^\n]+")


def _split_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``, each keeping its newline if it has one."""
    for match in _LINE.finditer(text):
        yield match.group()


def _read_operation(line: str) -> Operation | None:
    """Turn one input line into an instruction, or None for a line to skip."""
    size = len(line)
    if size == 1:
        return None
    if size == 2 or size > 4:
        raise InputError()
    return Operation.parse(line)


def run_checker(values: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply the instruction lines to stack a and tell whether it ends sorted.

    Each line must end with its newline. Lines of a single character are
    ignored; any other line that is not an instruction raises InputError.
    """
    stacks = Stacks(values)
    for line in lines:
        operation = _read_operation(line)
        if operation is not None:
            stacks.apply(operation)
    return stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Check the instructions on standard input against the numbers given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = check_duplicates(parse_arguments(args))
        sorted_ok = run_checker(values, _split_lines(sys.stdin.read()))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())