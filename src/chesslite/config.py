"""User-configurable settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_LOG_LEVEL_VAR = "CHESSLITE_LOG_LEVEL"
_EMPTY_GLYPH_VAR = "CHESSLITE_EMPTY_GLYPH"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    log_level: str = "WARNING"
    empty_glyph: str = " "  # printed for unoccupied cells

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Read overrides from ``CHESSLITE_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        if _LOG_LEVEL_VAR in env:
            settings.log_level = env[_LOG_LEVEL_VAR].upper()
        if _EMPTY_GLYPH_VAR in env:
            glyph = env[_EMPTY_GLYPH_VAR]
            if len(glyph) != 1:
                raise ValueError(f"{_EMPTY_GLYPH_VAR} must be one character: {glyph!r}")
            settings.empty_glyph = glyph
        return settings
