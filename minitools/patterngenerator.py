"""Generate simple triangular and square number patterns."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from enum import Enum
from typing import TextIO


class Pattern(Enum):
    A = "A"  # 1 .. row number
    B = "B"  # row number .. row number + size - 1
    C = "C"  # row number down to 1


def generate(pattern: Pattern | str, size: int) -> list[list[int]]:
    """Rows of the pattern; an unknown pattern raises ValueError."""
    pattern = Pattern(pattern)
    rows = range(size)
    if pattern is Pattern.A:
        return [list(range(1, i + 2)) for i in rows]
    if pattern is Pattern.B:
        return [list(range(i + 1, i + 1 + size)) for i in rows]
    return [list(range(i + 1, 0, -1)) for i in rows]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Ask for a pattern and size on standard input and print the pattern."""
    parser = argparse.ArgumentParser(prog="patterngenerator", description="Number patterns.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    print("Choose one of 3 patterns to generate, enter A, B or C: ", end="")
    try:
        choice = next(tokens)
        print("\nNow enter a number (0-100): ", end="")
        size = int(next(tokens))
    except (StopIteration, ValueError):
        print("\nInvalid input.")
        return 1
    print()

    try:
        pattern = Pattern(choice)
    except ValueError:
        print("Invalid choice, using pattern A by default.")
        pattern = Pattern.A

    for row in generate(pattern, size):
        print(" ".join(str(value) for value in row))
    return 0


if __name__ == "__main__":
    sys.exit(main())