"""Player seats and their betting state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class State(Enum):
    """Whether a seat is still betting, all in, or folded."""

    BETTING = "betting"
    SHOVING = "shoving"
    FOLDING = "folding"

    def __str__(self) -> str:
        return _STATE_SYMBOLS[self]


_STATE_SYMBOLS = {
    State.BETTING: "P",
    State.SHOVING: "S",
    State.FOLDING: "F",
}


@dataclass
class Seat:
    """A player's chips, current street stake, total spend and hole cards."""

    stack: int
    stake: int = 0
    spent: int = 0
    state: State = State.BETTING
    cards: Any = None

    def win(self, amount: int) -> None:
        self.stack += amount

    def bet(self, amount: int) -> None:
        self.stack -= amount
        self.stake += amount
        self.spent += amount

    def reset_state(self, state: State) -> None:
        self.state = state

    def reset_cards(self, cards: Any) -> None:
        self.cards = cards

    def reset_stake(self) -> None:
        self.stake = 0

    def reset_spent(self) -> None:
        self.spent = 0

    def __str__(self) -> str:
        cards = "" if self.cards is None else str(self.cards)
        return f"{self.state} ${self.stack:>4} {cards}"