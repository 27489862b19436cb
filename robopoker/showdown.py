"""Distribution of the pot, including side pots and splits."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable, List, Optional

from robopoker.seat import State
from robopoker.settlement import Settlement


class Showdown:
    """Pays out a hand's pot to the strongest eligible players, pot by pot."""

    def __init__(self, payouts: Iterable[Settlement]) -> None:
        self._payouts: List[Settlement] = [dataclasses.replace(p) for p in payouts]
        self._distributing = 0
        self._distributed = 0
        # None stands for a strength above every possible hand
        self._best: Optional[Any] = None

    def settle(self) -> List[Settlement]:
        """Return the settlements with rewards filled in."""
        while (strength := self._strongest()) is not None:
            self._best = strength
            while (amount := self._remaining()) is not None:
                self._distributing = amount
                self._distribute()
                if self._is_complete():
                    return self._payouts
        return self._payouts

    def _strongest(self) -> Optional[Any]:
        candidates = [
            p.strength
            for p in self._payouts
            if (self._best is None or p.strength < self._best)
            and p.status is not State.FOLDING
        ]
        return max(candidates, default=None)

    def _remaining(self) -> Optional[int]:
        self._distributed = self._distributing
        return min(
            (p.risked for p in self._winners()),
            default=None,
        )

    def _winners(self) -> List[Settlement]:
        return [
            p
            for p in self._payouts
            if p.status is not State.FOLDING
            and p.strength == self._best
            and p.risked > self._distributed
        ]

    def _winnings(self) -> int:
        return sum(
            max(min(p.risked, self._distributing) - self._distributed, 0)
            for p in self._payouts
        )

    def _distribute(self) -> None:
        chips = self._winnings()
        winners = self._winners()
        share, bonus = divmod(chips, len(winners))
        for winner in winners:
            winner.reward += share
        for winner in winners[:bonus]:
            winner.reward += 1

    def _is_complete(self) -> bool:
        staked = sum(p.risked for p in self._payouts)
        reward = sum(p.reward for p in self._payouts)
        return staked == reward