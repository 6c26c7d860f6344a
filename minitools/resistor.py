"""Equivalent resistance of three resistors in every combination."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import astuple, dataclass


def _parallel(*resistances: float) -> float:
    return 1 / sum(1 / r for r in resistances)


@dataclass(frozen=True)
class Combinations:
    """Equivalent resistances of three resistors wired in different ways."""

    series: float
    parallel: float
    first_with_rest_parallel: float
    second_with_rest_parallel: float
    third_with_rest_parallel: float

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))


def resistor_combinations(r1: float, r2: float, r3: float) -> Combinations:
    """All series, parallel and mixed combinations of three resistors.

    Each mixed combination puts one resistor in series with the other two in
    parallel.
    """
    return Combinations(
        series=r1 + r2 + r3,
        parallel=_parallel(r1, r2, r3),
        first_with_rest_parallel=r1 + _parallel(r2, r3),
        second_with_rest_parallel=r2 + _parallel(r1, r3),
        third_with_rest_parallel=_parallel(r1, r2) + r3,
    )


def main(argv: list[str] | None = None) -> int:
    """Print the combinations for three sample resistors."""
    parser = argparse.ArgumentParser(prog="resistor", description="Resistor combinations.")
    parser.parse_args(argv)
    for value in resistor_combinations(3.1, 3.4, 6.5):
        print(f"The value is: {value:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())