"""Turning command-line arguments into the numbers to sort."""

from __future__ import annotations

from typing import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read an optionally signed decimal integer that fits in 32 bits.

    Only ASCII digits are allowed after the sign. A bare sign or an empty
    string reads as zero.
    """
    digits = text[1:] if text[:1] in ("-", "+") else text
    if any(char not in _DIGITS for char in digits):
        raise InputError()
    value = int(digits) if digits else 0
    if text.startswith("-"):
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def split_arguments(text: str) -> list[str]:
    """Split on spaces, dropping the empty pieces runs of spaces leave."""
    return [token for token in text.split(" ") if token]


def make_values(tokens: Iterable[str]) -> list[int]:
    """Parse every token; raise InputError on a bad token or a repeated number."""
    values = [parse_int(token) for token in tokens]
    if len(set(values)) != len(values):
        raise InputError()
    return values


def parse_arguments(args: Sequence[str]) -> list[int]:
    """The numbers given on the command line, program name excluded.

    A single argument is split on spaces; several arguments are taken one
    number each. An empty list means there is nothing to sort.
    """
    if not args:
        return []
    if len(args) == 1:
        return make_values(split_arguments(args[0]))
    return make_values(args)