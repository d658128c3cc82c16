"""Piece colors and piece types."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Which side a piece belongs to; only compared for equality."""

    WHITE = 0
    BLACK = 1


class PieceType(IntEnum):
    """The six kinds of piece, each with its own movement rule."""

    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6
