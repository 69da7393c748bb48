"""Reading and validating the integers handed to the programs on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_DIGITS = 12

_DIGITS = frozenset("0123456789")
_LEADING_SPACE = " \t\n\f\v\r"


class InputError(ValueError):
    """Raised when the arguments or instructions are not acceptable."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_number(token: str) -> int:
    """Convert one token to a 32-bit signed integer.

    Leading whitespace is skipped, one sign is allowed when something follows
    it, and the rest must be at most twelve ASCII digits. A token that holds
    nothing after its leading whitespace reads as zero.
    """
    rest = token.lstrip(_LEADING_SPACE)
    sign = 1
    if len(rest) > 1 and rest[0] in "+-":
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    if not rest:
        return 0
    if len(rest) > MAX_DIGITS or not set(rest) <= _DIGITS:
        raise InputError()
    value = sign * int(rest)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def _split_words(argument: str) -> list[str]:
    return [word for word in argument.split(" ") if word]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Read every argument, each holding one or more space-separated numbers.

    The result keeps the order of the input: its first item is the top of the
    stack. An argument with no numbers in it is an error.
    """
    numbers: list[int] = []
    for argument in args:
        words = _split_words(argument)
        if not words:
            raise InputError()
        numbers.extend(parse_number(word) for word in words)
    return numbers


def check_duplicates(values: Sequence[int]) -> Sequence[int]:
    """Return the values unchanged, or raise if any of them repeats."""
    if len(set(values)) != len(values):
        raise InputError()
    return values


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether the values, listed from the top, never decrease."""
    return all(first <= second for first, second in pairwise(values))