"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece

# Letter ↔ piece type for compact test setups; lowercase letters are black.
_LETTER_TYPES: dict[str, PieceType] = {
    "k": PieceType.KING,
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
    "p": PieceType.PAWN,
}


def piece_from_letter(char: str) -> Piece:
    """``"N"`` → white knight, ``"n"`` → black knight."""
    color = Color.WHITE if char.isupper() else Color.BLACK
    return Piece(color, _LETTER_TYPES[char.lower()])


@pytest.fixture
def board() -> Board:
    """A fresh empty board."""
    return Board()


@pytest.fixture
def place(board: Board) -> Callable[..., Piece]:
    """Put a piece on the ``board`` fixture: ``place(row, col, "n")``."""

    def _place(row: int, col: int, char: str) -> Piece:
        piece = piece_from_letter(char)
        board.set(row, col, piece)
        return piece

    return _place


@pytest.fixture
def black_king() -> Piece:
    return Piece(Color.BLACK, PieceType.KING)
