"""Board - piece placement on an 8x8 grid and the move operation."""

from __future__ import annotations

import logging

from chesslite.core import rules
from chesslite.core.exceptions import InvalidMoveError, OutOfBoundsError
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE, Coord, all_coords, is_on_board

_LOGGER = logging.getLogger(__name__)


class Board:
    """Mutable 8x8 grid of optional pieces."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> Piece | None:
        """Occupant of ``(row, col)``, or ``None`` when the cell is empty."""
        if not is_on_board(row, col):
            raise OutOfBoundsError(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, piece: Piece | None) -> None:
        """Overwrite a cell unconditionally; no legality check."""
        if not is_on_board(row, col):
            raise OutOfBoundsError(row, col)
        self._cells[row][col] = piece

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    def is_occupied(self, row: int, col: int) -> bool:
        return not self.is_empty(row, col)

    # -- Moves --------------------------------------------------------------

    def is_valid_move(
        self, row_from: int, col_from: int, row_to: int, col_to: int
    ) -> bool:
        """Whether the piece at the source may move to the destination."""
        return rules.is_valid_move(self, row_from, col_from, row_to, col_to)

    def move_piece(
        self, row_from: int, col_from: int, row_to: int, col_to: int
    ) -> Piece | None:
        """Move a piece and return whatever stood on the destination.

        Raises:
            InvalidMoveError: if the move is not legal.  The board is left
                untouched.
        """
        if not self.is_valid_move(row_from, col_from, row_to, col_to):
            _LOGGER.debug(
                "Rejected move (%d, %d) -> (%d, %d)", row_from, col_from, row_to, col_to
            )
            raise InvalidMoveError(row_from, col_from, row_to, col_to)

        piece = self.get(row_from, col_from)
        captured = self.get(row_to, col_to)
        self.set(row_to, col_to, piece)
        self.set(row_from, col_from, None)
        _LOGGER.debug(
            "Moved %s (%d, %d) -> (%d, %d), captured %s",
            piece,
            row_from,
            col_from,
            row_to,
            col_to,
            captured,
        )
        return captured

    def valid_destinations(self, row: int, col: int) -> list[Coord]:
        """All cells the piece on ``(row, col)`` may move to, row-major."""
        return [
            (row_to, col_to)
            for row_to, col_to in all_coords()
            if self.is_valid_move(row, col, row_to, col_to)
        ]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Display ------------------------------------------------------------

    def render(self, empty: str = " ") -> str:
        """One line per row in storage order, glyph or *empty* per cell."""
        lines = []
        for row in self._cells:
            lines.append("".join(p.symbol if p else empty for p in row) + "\n")
        return "".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        rows: list[str] = []
        for idx, row in enumerate(self._cells):
            rows.append(f"{idx} {' '.join(repr(p) if p else '.' for p in row)}")
        rows.append("  " + " ".join(str(c) for c in range(BOARD_SIZE)))
        return "\n".join(rows)
