"""Per-player outcome of a hand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from robopoker.seat import State


@dataclass
class Settlement:
    """Chips a player risked, their status and strength, and what they won."""

    risked: int
    status: State
    strength: Any
    reward: int = 0

    def pnl(self) -> int:
        return self.reward - self.risked

    def __str__(self) -> str:
        if self.reward > 0:
            return f"{'+' + str(self.reward):<5}{self.strength}"
        return f"     {self.strength}"