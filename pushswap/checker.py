"""Command that reads operations from standard input and checks they sort the stack."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .parsing import InputError, parse_arguments
from .stack import Operation, Stacks

EXIT_FAILURE = 255


class CommandError(ValueError):
    """Raised for an unknown instruction or one that cannot be carried out."""


def parse_command(line: str) -> Operation:
    """The operation named by ``line``; anything from the first newline on is ignored."""
    name = line.split("\n", 1)[0]
    try:
        return Operation(name)
    except ValueError:
        raise CommandError(f"unknown instruction {name!r}") from None


def run_commands(stacks: Stacks, lines: Iterable[str]) -> None:
    """Carry out each line's operation in turn on ``stacks``.

    Raises CommandError at the first line that is not an instruction or
    whose operation needs a stack that is empty.
    """
    for line in lines:
        operation = parse_command(line)
        if not stacks.apply(operation):
            raise CommandError(f"cannot carry out {operation} on an empty stack")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check that the instructions on standard input sort the numbers in ``argv``.

    Prints ``OK`` when they do and ``KO`` when they do not; bad numbers or
    bad instructions print ``Error``.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return EXIT_FAILURE
    if not values:
        return EXIT_FAILURE
    stacks = Stacks(values)
    try:
        run_commands(stacks, sys.stdin)
    except CommandError:
        sys.stdout.write("Error\n")
        return EXIT_FAILURE
    sys.stdout.write("OK\n" if stacks.is_sorted() else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())