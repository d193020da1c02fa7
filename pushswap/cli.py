"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import InputError, parse_arguments
from .stack import Stacks
from .strategy import push_swap

EXIT_FAILURE = 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers in ``argv`` and print one operation per line.

    ``argv`` holds the arguments without the program name; by default they
    are taken from the command line. Bad input prints ``Error``.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return EXIT_FAILURE
    if not values:
        return EXIT_FAILURE
    stacks = Stacks(values, record=True)
    push_swap(stacks)
    sys.stdout.write("".join(f"{operation}\n" for operation in stacks.operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())