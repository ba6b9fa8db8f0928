from __future__ import annotations

from typing import Sequence

from tetris_board import Board
from tetris_piece import Piece


class FixedGenerator:
    """Hands out pieces from a fixed letter sequence, repeating the last one."""

    def __init__(self, letters: Sequence[str], cols: int = 10):
        self.letters = list(letters)
        self.cols = cols
        self.i = 0

    def next_piece(self) -> Piece:
        t = self.letters[min(self.i, len(self.letters) - 1)]
        self.i += 1
        return Piece.spawn(t, self.cols)


def fill_row(board: Board, y: int, color: str = "#888888", gap: int | None = None) -> None:
    for x in range(len(board[0])):
        board[y][x] = None if x == gap else color
