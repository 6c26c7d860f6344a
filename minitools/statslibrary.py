"""Descriptive statistics over lists of numbers."""

from __future__ import annotations

import argparse
import math
import sys
from collections import Counter
from collections.abc import Iterable

_SAMPLE = (2.3, 3.3, 5.1, 3.3, 7.8, 8.4, 6.6)


def _require_values(values: Iterable[float]) -> list[float]:
    items = list(values)
    if not items:
        raise ValueError("no values given")
    return items


def harmonic_mean(values: Iterable[float]) -> float:
    """Count of values divided by the sum of their reciprocals."""
    items = _require_values(values)
    if any(value == 0 for value in items):
        raise ValueError("harmonic mean is undefined when a value is zero")
    return len(items) / sum(1 / value for value in items)


def geometric_mean(values: Iterable[float]) -> float:
    """The n-th root of the product of n values."""
    items = _require_values(values)
    return math.pow(math.prod(items), 1.0 / len(items))


def remove_outliers(values: Iterable[float], threshold: float) -> list[float]:
    """Values whose distance from the mean is at most threshold, in order.

    The mean is taken once, over all the values given.
    """
    items = list(values)
    if not items:
        return []
    mean = sum(items) / len(items)
    return [value for value in items if abs(value - mean) <= threshold]


def find_mode(values: Iterable[float]) -> tuple[float, int]:
    """The most frequent value and how often it occurs; ties go to the first seen."""
    counts = Counter(_require_values(values))
    mode = max(counts, key=counts.__getitem__)
    return mode, counts[mode]


def main(argv: list[str] | None = None) -> int:
    """Print the statistics of a fixed sample."""
    parser = argparse.ArgumentParser(prog="statslibrary", description="Statistics demo.")
    parser.parse_args(argv)

    print(f"{harmonic_mean(_SAMPLE):.2f}")
    print(f"{geometric_mean(_SAMPLE):.2f}")
    mode, count = find_mode(_SAMPLE)
    print(f"The mode is {mode:.2f}, which occured {count} times")
    return 0


if __name__ == "__main__":
    sys.exit(main())