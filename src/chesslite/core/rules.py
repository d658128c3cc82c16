"""Move legality: per-piece geometry, obstruction and capture rules.

The predicate only looks at the current occupancy of the board.  There is
no notion of whose turn it is, of check, or of any earlier move.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from chesslite.core.enums import PieceType
from chesslite.core.types import is_on_board

if TYPE_CHECKING:
    from chesslite.core.board import Board

# (board, row_from, col_from, row_to, col_to) -> legal?
MoveRule: TypeAlias = Callable[["Board", int, int, int, int], bool]

# Pawns advance toward increasing rows and may double-step from this row,
# whatever their color.
PAWN_START_ROW = 0


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def is_path_clear(
    board: Board, row_from: int, col_from: int, row_to: int, col_to: int
) -> bool:
    """Whether every cell strictly between the two ends of a line is empty.

    The line must be horizontal, vertical or diagonal.
    """
    step_row = _sign(row_to - row_from)
    step_col = _sign(col_to - col_from)
    row, col = row_from + step_row, col_from + step_col
    while (row, col) != (row_to, col_to):
        if board.is_occupied(row, col):
            return False
        row += step_row
        col += step_col
    return True


# -- Per-piece rules ---------------------------------------------------------


def king_move(
    board: Board, row_from: int, col_from: int, row_to: int, col_to: int
) -> bool:
    return abs(row_to - row_from) <= 1 and abs(col_to - col_from) <= 1


def rook_move(
    board: Board, row_from: int, col_from: int, row_to: int, col_to: int
) -> bool:
    if row_from != row_to and col_from != col_to:
        return False
    return is_path_clear(board, row_from, col_from, row_to, col_to)


def bishop_move(
    board: Board, row_from: int, col_from: int, row_to: int, col_to: int
) -> bool:
    d_row = abs(row_to - row_from)
    d_col = abs(col_to - col_from)
    if d_row == 0 or d_row != d_col:
        return False
    return is_path_clear(board, row_from, col_from, row_to, col_to)


def queen_move(
    board: Board, row_from: int, col_from: int, row_to: int, col_to: int
) -> bool:
    return rook_move(board, row_from, col_from, row_to, col_to) or bishop_move(
        board, row_from, col_from, row_to, col_to
    )


def knight_move(
    board: Board, row_from: int, col_from: int, row_to: int, col_to: int
) -> bool:
    return {abs(row_to - row_from), abs(col_to - col_from)} == {1, 2}


def pawn_move(
    board: Board, row_from: int, col_from: int, row_to: int, col_to: int
) -> bool:
    """Diagonal step only as a capture; forward one step, two from the start row.

    The forward scan covers the destination cell too, so a pawn can never
    move straight onto an occupied square.
    """
    d_row = abs(row_to - row_from)
    d_col = abs(col_to - col_from)

    if (d_row, d_col) == (1, 1):
        return board.is_occupied(row_to, col_to)

    allowed_forward = 2 if row_from == PAWN_START_ROW else 1
    if col_from != col_to or d_row > allowed_forward:
        return False

    # An empty range (row_to < row_from) passes, as it always has.
    for row in range(row_from + 1, row_to + 1):
        if board.is_occupied(row, col_from):
            return False
    return True


_RULES: dict[PieceType, MoveRule] = {
    PieceType.KING: king_move,
    PieceType.QUEEN: queen_move,
    PieceType.ROOK: rook_move,
    PieceType.BISHOP: bishop_move,
    PieceType.KNIGHT: knight_move,
    PieceType.PAWN: pawn_move,
}


def is_valid_move(
    board: Board, row_from: int, col_from: int, row_to: int, col_to: int
) -> bool:
    """Whether the piece on the source cell may move to the destination cell.

    Never raises: off-board coordinates, a null move, an empty source or a
    friendly piece on the destination all give ``False``.
    """
    if (row_from, col_from) == (row_to, col_to):
        return False
    if not is_on_board(row_to, col_to) or not is_on_board(row_from, col_from):
        return False

    piece = board.get(row_from, col_from)
    if piece is None:
        return False

    target = board.get(row_to, col_to)
    if target is not None and target.color == piece.color:
        return False

    return _RULES[piece.piece_type](board, row_from, col_from, row_to, col_to)
