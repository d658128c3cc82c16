"""Player value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Player:
    """A named participant.  Pure data; turn order is up to the host."""

    name: str

    def __str__(self) -> str:
        return f"Player with name {self.name}"
