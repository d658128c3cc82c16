"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.enums import Color, PieceType

_GLYPHS: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: {
        PieceType.KING: "♔",
        PieceType.QUEEN: "♕",
        PieceType.ROOK: "♖",
        PieceType.BISHOP: "♗",
        PieceType.KNIGHT: "♘",
        PieceType.PAWN: "♙",
    },
    Color.BLACK: {
        PieceType.KING: "♚",
        PieceType.QUEEN: "♛",
        PieceType.ROOK: "♜",
        PieceType.BISHOP: "♝",
        PieceType.KNIGHT: "♞",
        PieceType.PAWN: "♟",
    },
}

# Debugging letters: uppercase white, lowercase black.
_LETTERS: dict[PieceType, str] = {
    PieceType.KING: "K",
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.PAWN: "P",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A color and a piece type; equal pieces are interchangeable."""

    color: Color
    piece_type: PieceType

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        return _GLYPHS[self.color][self.piece_type]

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()
