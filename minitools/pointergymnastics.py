"""Small sequence and string manipulation routines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import MutableSequence, Sequence
from typing import Any


def swap_sequences(first: MutableSequence[Any], second: MutableSequence[Any]) -> None:
    """Exchange the contents of two equally long sequences in place."""
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    first[:], second[:] = list(second), list(first)


def find_substring(text: str, sub: str) -> int | None:
    """Index of the first occurrence of sub in text, or None if absent or empty."""
    if not sub:
        return None
    index = text.find(sub)
    return None if index < 0 else index


def reverse_text(text: str) -> str:
    return text[::-1]


def copy_bytes(dest: MutableSequence[Any], src: Sequence[Any], n: int) -> MutableSequence[Any]:
    """Copy the first n items of src over the start of dest and return dest."""
    if n < 0:
        raise ValueError("count must not be negative")
    if n > len(src) or n > len(dest):
        raise IndexError("count exceeds the length of a buffer")
    dest[:n] = src[:n]
    return dest


def main(argv: list[str] | None = None) -> int:
    """Demonstrate the routines on fixed sample data."""
    parser = argparse.ArgumentParser(prog="pointergymnastics", description="Sequence demo.")
    parser.parse_args(argv)

    first = [3, 4, 8, 7, 6]
    second = [9, 4, 0, 9, 2]
    text = "hello"
    sub = "he"
    dest = bytearray(8)

    swap_sequences(first, second)
    print("Arrays swapped.")

    print(f"Size and sub-size: {len(text)} and {len(sub)}")
    index = find_substring(text, sub)
    print("Substring not found." if index is None else f"Substring found at index {index}")

    print(reverse_text(text))

    copy_bytes(dest, text.encode(), len(text))
    print(chr(dest[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())