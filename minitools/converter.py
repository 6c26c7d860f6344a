"""Convert integers to binary, octal and hexadecimal digit strings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

_DIGITS = "0123456789ABCDEF"


def _to_base(num: int, base: int) -> str:
    digits = []
    while num > 0:
        num, remainder = divmod(num, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def to_binary(num: int) -> str:
    """Binary digits of a positive number; empty for zero or less."""
    return _to_base(num, 2)


def to_octal(num: int) -> str:
    """Octal digits of a positive number; empty for zero or less."""
    return _to_base(num, 8)


def to_hex(num: int) -> str:
    """Upper-case hexadecimal digits of a positive number; empty for zero or less."""
    return _to_base(num, 16)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Ask for a number and a base on standard input and print the conversion."""
    parser = argparse.ArgumentParser(prog="converter", description="Number base converter.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    print("Enter an integer number: ", end="")
    try:
        num = int(next(tokens))
        print(
            "What form would you like to convert number to?\n"
            "1 - Binary\n2 - Octal\n3 - Hexadecimal\nChoice: ",
            end="",
        )
        choice = int(next(tokens))
    except (StopIteration, ValueError):
        print("\nInvalid input.")
        return 1

    conversions = {1: to_binary, 2: to_octal, 3: to_hex}
    convert = conversions.get(choice)
    if convert is not None:
        print(convert(num))
    return 0


if __name__ == "__main__":
    sys.exit(main())