"""Exceptions raised by the board."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all chesslite errors."""


class InvalidMoveError(ChessError, ValueError):
    """The requested move is not legal on the current board."""

    def __init__(self, row_from: int, col_from: int, row_to: int, col_to: int) -> None:
        super().__init__(
            f"Invalid move: ({row_from}, {col_from}) -> ({row_to}, {col_to})"
        )
        self.row_from = row_from
        self.col_from = col_from
        self.row_to = row_to
        self.col_to = col_to


class OutOfBoundsError(ChessError, IndexError):
    """A cell coordinate lies outside the 8x8 grid."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell out of bounds: ({row}, {col})")
        self.row = row
        self.col = col
