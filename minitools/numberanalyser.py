"""Summary statistics and primes of a list of integers."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

SENTINEL = -999


@dataclass(frozen=True)
class Analysis:
    """Results of analysing a list of integers."""

    total: int
    average: int
    maximum: int
    minimum: int
    previous_maximum: int | None
    primes: tuple[int, ...]
    even: int
    odd: int


def is_prime(n: int) -> bool:
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def analyse(numbers: Iterable[int]) -> Analysis:
    """Analyse the numbers; the average is truncated toward zero.

    previous_maximum is the running maximum just before the final maximum
    was reached, or None if the first number was the maximum.
    """
    values = list(numbers)
    if not values:
        raise ValueError("no numbers to analyse")

    maximum: int | None = None
    previous: int | None = None
    for value in values:
        if maximum is None or value > maximum:
            previous, maximum = maximum, value

    total = sum(values)
    even = sum(1 for value in values if value % 2 == 0)
    return Analysis(
        total=total,
        average=_truncating_divide(total, len(values)),
        maximum=max(values),
        minimum=min(values),
        previous_maximum=previous,
        primes=tuple(value for value in values if is_prime(value)),
        even=even,
        odd=len(values) - even,
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read integers from standard input until -999 and print the analysis."""
    parser = argparse.ArgumentParser(prog="numberanalyser", description="Analyse numbers.")
    parser.parse_args(argv)

    numbers = []
    tokens = _tokens(sys.stdin)
    while True:
        print("Enter a number: ", end="")
        try:
            num = int(next(tokens))
        except StopIteration:
            print()
            break
        except ValueError:
            print("\nInvalid input.")
            return 1
        if num == SENTINEL:
            break
        numbers.append(num)

    try:
        result = analyse(numbers)
    except ValueError as exc:
        print(f"\n{exc}")
        return 1

    previous = "none" if result.previous_maximum is None else result.previous_maximum
    for value in (result.total, result.average, result.maximum, result.minimum, previous):
        print(f"The results of the array: {value}")
    print("The prime numbers are: " + " ".join(str(p) for p in result.primes))
    return 0


if __name__ == "__main__":
    sys.exit(main())