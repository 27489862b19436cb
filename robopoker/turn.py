"""Whose turn it is at a game node."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_PLAYER = re.compile(r"\+?[0-9]+")


class TurnKind(Enum):
    TERMINAL = "terminal"
    CHANCE = "chance"
    CHOICE = "choice"


@dataclass(frozen=True)
class Turn:
    """Terminal, chance, or a choice for a player index."""

    kind: TurnKind
    player: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.kind is TurnKind.CHOICE) != (self.player is not None):
            raise ValueError("only choice turns carry a player")
        if self.player is not None and self.player < 0:
            raise ValueError("player index must be non-negative")

    @classmethod
    def terminal(cls) -> Turn:
        return cls(TurnKind.TERMINAL)

    @classmethod
    def chance(cls) -> Turn:
        return cls(TurnKind.CHANCE)

    @classmethod
    def choice(cls, player: int) -> Turn:
        return cls(TurnKind.CHOICE, player)

    def position(self) -> int:
        if self.player is None:
            raise ValueError(f"{self} turn has no player position")
        return self.player

    @classmethod
    def parse(cls, text: str) -> Turn:
        if text == "XX":
            return cls.terminal()
        if text == "??":
            return cls.chance()
        if text.startswith("P"):
            digits = text[1:]
            if not _PLAYER.fullmatch(digits) or int(digits) >= 1 << 64:
                raise ValueError("invalid player turn")
            return cls.choice(int(digits))
        raise ValueError("invalid ply input")

    def __str__(self) -> str:
        if self.kind is TurnKind.CHOICE:
            return f"P{self.player}"
        if self.kind is TurnKind.TERMINAL:
            return "XX"
        return "??"