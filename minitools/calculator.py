"""Arithmetic calculator that keeps a memory of its results."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator
from typing import TextIO

_MENU = (
    "Enter a operation from the list:\n"
    "1 - Add\n2 - Subtract\n3 - Mulitply\n4 - Divide\n"
    "5 - Modulo\n6 - Powers\n7 - Square root\n\nEnter your choice: "
)


class Calculator:
    """Performs arithmetic and remembers every result it produces."""

    def __init__(self) -> None:
        self._memory: list[float] = []

    def _remember(self, result: float) -> float:
        self._memory.append(result)
        return result

    def add(self, a: float, b: float) -> float:
        return self._remember(a + b)

    def subtract(self, a: float, b: float) -> float:
        return self._remember(a - b)

    def multiply(self, a: float, b: float) -> float:
        return self._remember(a * b)

    def divide(self, a: float, b: float) -> float:
        if b == 0:
            raise ZeroDivisionError("Cannot divide by zero.")
        return self._remember(a / b)

    def modulo(self, a: float, b: float) -> float:
        """Remainder with the sign of the dividend, as fmod computes it."""
        if b == 0:
            raise ZeroDivisionError("Cannot take modulo by zero.")
        return self._remember(math.fmod(a, b))

    def power(self, base: float, exponent: float) -> float:
        return self._remember(math.pow(base, exponent))

    def square_root(self, a: float) -> float:
        if a < 0:
            raise ValueError("Cannot take square root of negative number!")
        return self._remember(math.sqrt(a))

    def store(self, value: float) -> None:
        """Put a value into memory as if it were a result."""
        self._memory.append(value)

    def add_to_last(self, value: float) -> float:
        """Add to the most recent value in memory and return the new value."""
        if not self._memory:
            raise IndexError("memory is empty")
        self._memory[-1] += value
        return self._memory[-1]

    def recall(self) -> tuple[float, ...]:
        """All values in memory, oldest first."""
        return tuple(self._memory)

    def clear(self) -> None:
        self._memory.clear()


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _print_recall(calc: Calculator) -> None:
    print("Printing calculations in memory...")
    values = calc.recall()
    for value in values:
        print(f"{value:.2f}")
    if values:
        print()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive calculator on standard input."""
    parser = argparse.ArgumentParser(prog="calculator", description="Interactive calculator.")
    parser.parse_args(argv)

    calc = Calculator()
    operations = {
        1: calc.add,
        2: calc.subtract,
        3: calc.multiply,
        4: calc.divide,
        5: calc.modulo,
        6: calc.power,
        7: lambda a, _b: calc.square_root(a),
    }
    tokens = _tokens(sys.stdin)

    while True:
        print("Enter two numbers: ", end="")
        try:
            a = float(next(tokens))
            b = float(next(tokens))
            print(_MENU, end="")
            choice = int(next(tokens))
        except StopIteration:
            print()
            return 0
        except ValueError:
            print("Invalid input.")
            return 1

        operation = operations.get(choice)
        if operation is None:
            print("Not a valid choice.")
            return 0

        try:
            result = operation(a, b)
        except (ZeroDivisionError, ValueError, OverflowError) as exc:
            print(f"Error: {exc}")
            continue
        print(f"Result: {result:.2f}")

        calc.store(5.5)
        print(f"{5.5:.2f} stored in memory")
        _print_recall(calc)
        new_value = calc.add_to_last(1.0)
        print(f"Value added to most recent number in memory, new number is now {new_value:.2f}")
        _print_recall(calc)
        calc.clear()
        print("Memory cleared.")


if __name__ == "__main__":
    sys.exit(main())