"""Pot-normalised odds for raise sizes."""

from __future__ import annotations

import bisect
import math
import random
from dataclasses import dataclass
from typing import ClassVar

_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)


def _trunc_rem(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _ratio(a: int, b: int) -> float:
    if b == 0:
        return math.nan if a == 0 else math.copysign(math.inf, a)
    return a / b


def _round_i32(x: float) -> int:
    """Round half away from zero and saturate into the i32 range."""
    if math.isnan(x):
        return 0
    if math.isinf(x):
        return _I32_MAX if x > 0 else _I32_MIN
    rounded = math.floor(x + 0.5) if x >= 0 else math.ceil(x - 0.5)
    return max(_I32_MIN, min(_I32_MAX, rounded))


@dataclass(frozen=True, order=True)
class Odds:
    """A raise size expressed as a fraction of the pot."""

    numer: int
    denom: int

    GRID: ClassVar[tuple[Odds, ...]]
    PREF_RAISES: ClassVar[tuple[Odds, ...]]
    FLOP_RAISES: ClassVar[tuple[Odds, ...]]
    LATE_RAISES: ClassVar[tuple[Odds, ...]]
    LAST_RAISES: ClassVar[tuple[Odds, ...]]

    @classmethod
    def from_pair(cls, a: int, b: int) -> Odds:
        """Build odds by running Euclid's reduction over the pair."""
        while b != 0:
            a, b = b, _trunc_rem(a, b)
        return cls(a, b)

    @classmethod
    def nearest(cls, a: int, b: int) -> Odds:
        """The grid odds at or just below the ratio a / b."""
        odds = _ratio(a, b)
        if math.isnan(odds):
            raise ValueError("odds ratio is not a number")
        probabilities = [float(o) for o in cls.GRID]
        i = bisect.bisect_left(probabilities, odds)
        if i < len(probabilities) and probabilities[i] == odds:
            return cls.GRID[i]
        return cls.GRID[max(i - 1, 0)]

    @classmethod
    def random(cls) -> Odds:
        return random.choice(cls.GRID)

    def __float__(self) -> float:
        return _ratio(self.numer, self.denom)

    def __str__(self) -> str:
        p = float(self)
        if p > 1.0:
            return f"-{_round_i32(p)}"
        inverse = math.inf if p == 0 else 1.0 / p
        return f"+{_round_i32(inverse)}"


Odds.PREF_RAISES = (
    Odds(1, 4),
    Odds(1, 3),
    Odds(1, 2),
    Odds(2, 3),
    Odds(3, 4),
    Odds(1, 1),
    Odds(3, 2),
    Odds(2, 1),
    Odds(3, 1),
    Odds(4, 1),
)
Odds.GRID = Odds.PREF_RAISES
Odds.FLOP_RAISES = (Odds(1, 2), Odds(3, 4), Odds(1, 1), Odds(3, 2), Odds(2, 1))
Odds.LATE_RAISES = (Odds(1, 2), Odds(1, 1))
Odds.LAST_RAISES = (Odds(1, 1),)