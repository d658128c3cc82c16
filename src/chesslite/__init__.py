"""chesslite — an 8x8 chessboard with a stateless move-legality check."""

from chesslite.core import (
    Board,
    ChessError,
    Color,
    InvalidMoveError,
    OutOfBoundsError,
    Piece,
    PieceType,
)
from chesslite.game import Player

__all__ = [
    "Board",
    "ChessError",
    "Color",
    "InvalidMoveError",
    "OutOfBoundsError",
    "Piece",
    "PieceType",
    "Player",
]
