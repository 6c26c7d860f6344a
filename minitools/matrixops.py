"""Basic integer matrix operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]

_A = ((1, 2, 3), (4, 5, 6), (7, 8, 9))
_B = ((9, 8, 7), (6, 5, 4), (3, 2, 1))


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def _require_square(matrix: Matrix) -> int:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("matrix is not square")
    return rows


def format_matrix(matrix: Matrix) -> str:
    """One line per row, values separated by spaces."""
    return "".join(" ".join(str(value) for value in row) + "\n" for row in matrix)


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Matrix product of a and b."""
    a_rows, a_cols = _shape(a)
    b_rows, _ = _shape(b)
    if a_cols != b_rows:
        raise ValueError("matrix dimensions do not allow multiplication")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def determinant(matrix: Matrix) -> int:
    """Determinant of a square matrix by cofactor expansion along the first row."""
    size = _require_square(matrix)
    if size == 0:
        return 1
    if size == 1:
        return matrix[0][0]
    rest = [list(row) for row in matrix[1:]]
    return sum(
        (-1) ** col * value * determinant([row[:col] + row[col + 1 :] for row in rest])
        for col, value in enumerate(matrix[0])
    )


def transpose(matrix: Matrix) -> list[list[int]]:
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def is_symmetric(matrix: Matrix) -> bool:
    _require_square(matrix)
    return [list(row) for row in matrix] == transpose(matrix)


def main(argv: list[str] | None = None) -> int:
    """Show the operations on two sample matrices."""
    parser = argparse.ArgumentParser(prog="matrixops", description="Matrix operations demo.")
    parser.parse_args(argv)

    print("Matrix A:")
    print(format_matrix(_A))
    print("Matrix B:")
    print(format_matrix(_B))
    print("Matrices multiplied:")
    print(format_matrix(multiply(_A, _B)))
    print(f"Determinant of this array is: {determinant(_A)}")
    print(format_matrix(transpose(_B)))
    print("Matrix is symmetric." if is_symmetric(_A) else "Matrix not symmetric.")
    return 0


if __name__ == "__main__":
    sys.exit(main())