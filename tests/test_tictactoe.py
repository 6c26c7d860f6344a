import io

import pytest

from minitools.tictactoe import Board, main, next_player


def _board(moves):
    board = Board()
    for row, col, player in moves:
        board.make_move(row, col, player)
    return board


def test_new_board_renders_empty():
    assert Board().render() == "...\n...\n...\n"


def test_make_move_places_mark():
    board = _board([(1, 2, "X")])
    assert board[1, 2] == "X"
    assert board.render().splitlines()[1] == "..X"


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 3), (3, 3), (0, -1)])
def test_out_of_range_moves_invalid(row, col):
    assert Board().is_valid_move(row, col) is False


def test_occupied_cell_invalid():
    board = _board([(0, 0, "X")])
    assert board.is_valid_move(0, 0) is False
    assert board.is_valid_move(0, 1) is True
    with pytest.raises(ValueError):
        board.make_move(0, 0, "O")


def test_unknown_player_rejected():
    with pytest.raises(ValueError):
        Board().make_move(0, 0, "Z")


@pytest.mark.parametrize(
    "cells",
    [
        [(1, 0), (1, 1), (1, 2)],
        [(0, 2), (1, 2), (2, 2)],
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ],
)
def test_winning_lines(cells):
    board = _board([(r, c, "O") for r, c in cells])
    assert board.has_winner() is True


def test_no_winner_on_empty_or_partial_board():
    assert Board().has_winner() is False
    assert _board([(0, 0, "X"), (0, 1, "O"), (0, 2, "X")]).has_winner() is False


def test_full_board_draw():
    layout = ["XOX", "XOO", "OXX"]
    board = _board([(r, c, mark) for r, line in enumerate(layout) for c, mark in enumerate(line)])
    assert board.is_full() is True
    assert board.has_winner() is False
    assert board.render() == "".join(line + "\n" for line in layout)


def test_partial_board_not_full():
    assert _board([(0, 0, "X")]).is_full() is False


def test_next_player():
    assert next_player("X") == "O"
    assert next_player("O") == "X"
    with pytest.raises(ValueError):
        next_player("?")


def test_main_x_wins(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n1 0\n0 1\n1 1\n0 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.rstrip().endswith("X player wins!")


def test_main_skips_invalid_move(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 5\n0 0\n0 0\n1 0\n0 1\n1 1\n0 2\n"))
    assert main([]) == 0
    assert "X player wins!" in capsys.readouterr().out


def test_main_runs_out_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n"))
    assert main([]) == 1