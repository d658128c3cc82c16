"""Application entry point."""

from __future__ import annotations

import logging
import sys

from chesslite.config import AppSettings
from chesslite.core import Board, Color, Piece, PieceType

_LOGGER = logging.getLogger(__name__)


def run_application(settings: AppSettings | None = None) -> str:
    """Build the demo board and return its rendering."""
    settings = AppSettings.from_env() if settings is None else settings

    board = Board()
    board.set(0, 0, Piece(Color.BLACK, PieceType.KING))
    _LOGGER.info("Placed %s on (0, 0)", board.get(0, 0))
    return board.render(settings.empty_glyph)


def main() -> None:
    """Print a board holding a single black king."""
    settings = AppSettings.from_env()
    logging.basicConfig(level=settings.log_level)
    sys.stdout.write(run_application(settings))


if __name__ == "__main__":
    main()
