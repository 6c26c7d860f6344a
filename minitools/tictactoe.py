"""Two-player tic-tac-toe on the terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

EMPTY = "."
PLAYERS = ("X", "O")
SIZE = 3


def next_player(player: str) -> str:
    if player not in PLAYERS:
        raise ValueError(f"unknown player: {player!r}")
    return "O" if player == "X" else "X"


class Board:
    """A 3 by 3 board; empty cells hold '.'."""

    def __init__(self) -> None:
        self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        return self._cells[row][col]

    def is_valid_move(self, row: int, col: int) -> bool:
        return 0 <= row < SIZE and 0 <= col < SIZE and self._cells[row][col] == EMPTY

    def make_move(self, row: int, col: int, player: str) -> None:
        if player not in PLAYERS:
            raise ValueError(f"unknown player: {player!r}")
        if not self.is_valid_move(row, col):
            raise ValueError(f"invalid move: {row} {col}")
        self._cells[row][col] = player

    def _lines(self) -> Iterator[list[str]]:
        yield from self._cells
        yield from (list(column) for column in zip(*self._cells))
        yield [self._cells[i][i] for i in range(SIZE)]
        yield [self._cells[i][SIZE - 1 - i] for i in range(SIZE)]

    def has_winner(self) -> bool:
        return any(line[0] != EMPTY and len(set(line)) == 1 for line in self._lines())

    def is_full(self) -> bool:
        return all(cell != EMPTY for row in self._cells for cell in row)

    def render(self) -> str:
        return "".join("".join(row) + "\n" for row in self._cells)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Play a game with moves read from standard input as row and column."""
    parser = argparse.ArgumentParser(prog="tictactoe", description="Tic-tac-toe.")
    parser.parse_args(argv)

    board = Board()
    player = PLAYERS[0]
    tokens = _tokens(sys.stdin)
    while True:
        print(board.render())
        print("Your turn, enter an x y coord: ", end="")
        try:
            row = int(next(tokens))
            col = int(next(tokens))
        except StopIteration:
            print()
            return 1
        except ValueError:
            print("\nInvalid input.")
            return 1
        if not board.is_valid_move(row, col):
            continue
        board.make_move(row, col, player)
        if board.has_winner():
            print(board.render())
            print(f"{player} player wins!")
            return 0
        if board.is_full():
            print(board.render())
            print("It's a draw!")
            return 0
        player = next_player(player)


if __name__ == "__main__":
    sys.exit(main())