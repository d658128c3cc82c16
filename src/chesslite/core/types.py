"""Coordinate type alias and board-geometry helpers.

Cells are addressed by zero-based ``(row, col)`` pairs.  Row 0 is the
first row of internal storage and is printed first; there is no mapping
to chess ranks or files.
"""

from __future__ import annotations

from typing import TypeAlias

BOARD_SIZE = 8

Coord: TypeAlias = tuple[int, int]


def is_on_board(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def all_coords() -> list[Coord]:
    """Every cell in row-major order."""
    return [(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
