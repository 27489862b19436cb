"""Counted distributions over abstractions."""

from __future__ import annotations

import itertools
import math
import random
from typing import Dict, Iterable, Iterator, List, Tuple

from robopoker.abstraction import Abstraction, AbstractionKind, Street

_RANDOM_SUPPORT = 16
_RANDOM_SAMPLES = 64
_X_BINS = 32
_Y_BINS = 10


class Histogram:
    """A distribution over abstractions, stored as sample counts.

    The mass is the total number of samples; an abstraction's count is the
    number of times it was sampled.
    """

    def __init__(self) -> None:
        self._mass = 0
        self._counts: Dict[Abstraction, int] = {}

    @classmethod
    def from_abstractions(cls, abstractions: Iterable[Abstraction]) -> Histogram:
        histogram = cls()
        for abstraction in abstractions:
            histogram.increment(abstraction)
        return histogram

    @classmethod
    def random(cls) -> Histogram:
        """64 samples drawn by coin flips from 16 random flop abstractions."""
        pool = [
            a
            for a in (Abstraction.random() for _ in itertools.count())
            if a.street() is Street.FLOP
        ] if False else []
        while len(pool) < _RANDOM_SUPPORT:
            candidate = Abstraction.random()
            if candidate.street() is Street.FLOP:
                pool.append(candidate)
        chosen = (a for a in itertools.cycle(pool) if random.getrandbits(1))
        return cls.from_abstractions(itertools.islice(chosen, _RANDOM_SAMPLES))

    def set(self, abstraction: Abstraction, count: int) -> None:
        """Store a count for an abstraction and add it to the mass."""
        self._counts[abstraction] = count
        self._mass += count

    def density(self, x: Abstraction) -> float:
        """Weight of x; 0 if never witnessed, NaN for an empty histogram."""
        count = self._counts.get(x, 0)
        if self._mass == 0:
            return math.nan
        return count / self._mass

    def support(self) -> Iterator[Abstraction]:
        """Witnessed abstractions, in abstraction order."""
        return iter(sorted(self._counts))

    def n(self) -> int:
        return len(self._counts)

    @property
    def mass(self) -> int:
        return self._mass

    def increment(self, abstraction: Abstraction) -> Histogram:
        """Add one sample of the abstraction; returns self."""
        self._mass += 1
        self._counts[abstraction] = self._counts.get(abstraction, 0) + 1
        return self

    def absorb(self, other: Histogram) -> None:
        self._mass += other._mass
        for key, count in other._counts.items():
            self._counts[key] = self._counts.get(key, 0) + count

    def peek(self) -> Abstraction:
        """The smallest abstraction in the support."""
        if not self._counts:
            raise ValueError("histogram is empty")
        return min(self._counts)

    def _require_percent(self) -> None:
        if self.peek().kind is not AbstractionKind.PERCENT:
            raise ValueError("histogram is not over equity abstractions")

    def equity(self) -> float:
        """Expected equity of a histogram over equity buckets."""
        return sum(x * y for x, y in self.pdf())

    def pdf(self) -> List[Tuple[float, float]]:
        """(equity, probability) for each bucket, in equity order."""
        self._require_percent()
        return [(float(key), self._counts[key] / self._mass) for key in self.support()]

    def distribution(self) -> List[Tuple[Abstraction, float]]:
        """Abstractions with densities, most likely first."""
        entries = [(a, self.density(a)) for a in self.support()]
        entries.sort(key=lambda entry: entry[1], reverse=True)
        return entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Histogram):
            return NotImplemented
        return self._mass == other._mass and self._counts == other._counts

    def __repr__(self) -> str:
        return f"Histogram(mass={self._mass}, counts={dict(sorted(self._counts.items()))!r})"

    def __str__(self) -> str:
        pdf = self.pdf()
        bins = [0.0] * _X_BINS
        for key, value in pdf:
            x = min(math.floor(key * _X_BINS), _X_BINS - 1)
            bins[x] += value
        rows = [""]
        for y in range(_Y_BINS, 0, -1):
            level = y / _Y_BINS
            rows.append("".join(_glyph(b, level) for b in bins))
        rows.append("-" * _X_BINS)
        return "\n".join(rows)


def _glyph(value: float, level: float) -> str:
    if value >= level:
        return "█"
    if value >= level - 0.75 / _Y_BINS:
        return "▆"
    if value >= level - 0.50 / _Y_BINS:
        return "▄"
    if value >= level - 0.25 / _Y_BINS:
        return "▂"
    return " "