"""Game layer — participants."""

from chesslite.game.player import Player

__all__ = ["Player"]
