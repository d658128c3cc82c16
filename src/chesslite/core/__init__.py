"""Core domain layer — pieces, the board and move legality.

Quick start::

    from chesslite.core import Board, Color, Piece, PieceType

    board = Board()
    board.set(4, 4, Piece(Color.BLACK, PieceType.KING))
    board.is_valid_move(4, 4, 5, 5)  # True
"""

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.exceptions import ChessError, InvalidMoveError, OutOfBoundsError
from chesslite.core.piece import Piece
from chesslite.core.rules import is_valid_move
from chesslite.core.types import BOARD_SIZE, Coord, is_on_board

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "is_on_board",
    # Domain objects
    "Board",
    "Piece",
    "is_valid_move",
    # Errors
    "ChessError",
    "InvalidMoveError",
    "OutOfBoundsError",
]
