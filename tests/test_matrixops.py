import pytest

from minitools.matrixops import (
    determinant,
    format_matrix,
    is_symmetric,
    main,
    multiply,
    transpose,
)

A = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
B = [[9, 8, 7], [6, 5, 4], [3, 2, 1]]
IDENTITY = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
M = [[2, -1, 0], [1, 3, 4], [0, 5, -2]]


def test_format_matrix():
    assert format_matrix(A) == "1 2 3\n4 5 6\n7 8 9\n"


def test_multiply_by_identity():
    assert multiply(A, IDENTITY) == A
    assert multiply(IDENTITY, B) == B


def test_multiply_is_associative():
    assert multiply(multiply(A, B), M) == multiply(A, multiply(B, M))


def test_multiply_transpose_rule():
    assert transpose(multiply(A, B)) == multiply(transpose(B), transpose(A))


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_determinant_of_sample_is_zero():
    assert determinant(A) == 0


def test_determinant_of_identity():
    assert determinant(IDENTITY) == 1


def test_determinant_invariants():
    assert determinant(transpose(M)) == determinant(M)
    swapped = [M[1], M[0], M[2]]
    assert determinant(swapped) == -determinant(M)
    assert determinant(multiply(M, B)) == determinant(M) * determinant(B)


def test_determinant_requires_square():
    with pytest.raises(ValueError):
        determinant([[1, 2, 3], [4, 5, 6]])


def test_transpose():
    assert transpose(B)[0] == [9, 6, 3]
    assert transpose(transpose(A)) == A


def test_is_symmetric():
    assert not is_symmetric(A)
    symmetric = [[x + y for x, y in zip(r, c)] for r, c in zip(A, transpose(A))]
    assert is_symmetric(symmetric)


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Determinant of this array is: 0" in out
    assert out.rstrip().endswith("Matrix not symmetric.")