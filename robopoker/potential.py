"""Potentials and normalised distributions over abstractions."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Dict, Iterator, Mapping, Tuple

from robopoker.abstraction import Abstraction

if TYPE_CHECKING:
    from robopoker.histogram import Histogram


class Potential:
    """A value per abstraction, kept in abstraction order.

    Stands for a dual potential of the optimal transport problem, in log
    space, or for a normalised distribution over abstractions.
    """

    def __init__(self, potential: Mapping[Abstraction, float]) -> None:
        if not potential:
            raise ValueError("potential must not be empty")
        self._entries: Dict[Abstraction, float] = dict(sorted(potential.items()))

    @classmethod
    def _over(cls, entries: Dict[Abstraction, float]) -> Potential:
        potential = cls.__new__(cls)
        potential._entries = entries
        return potential

    @classmethod
    def zeroes(cls, histogram: Histogram) -> Potential:
        """Zero potential over the histogram's support."""
        return cls._over({x: 0.0 for x in histogram.support()})

    @classmethod
    def uniform(cls, histogram: Histogram) -> Potential:
        """Uniform distribution over the support, in log space."""
        n = histogram.n()
        return cls._over({x: math.log(1.0 / n) for x in histogram.support()})

    @classmethod
    def normalize(cls, histogram: Histogram) -> Potential:
        """The histogram's densities over its support."""
        return cls._over({x: histogram.density(x) for x in histogram.support()})

    def density(self, x: Abstraction) -> float:
        try:
            value = self._entries[x]
        except KeyError:
            raise KeyError(f"abstraction {x} not in potential") from None
        if not math.isfinite(value):
            raise ValueError("density overflow")
        return value

    def support(self) -> Iterator[Abstraction]:
        return iter(self._entries)

    def values(self) -> Iterator[float]:
        return iter(self._entries.values())

    def items(self) -> Iterator[Tuple[Abstraction, float]]:
        return iter(self._entries.items())

    def increment(self, x: Abstraction, delta: float) -> None:
        if x not in self._entries:
            raise KeyError(f"abstraction {x} not in fixed abstraction space")
        self._entries[x] += delta

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Potential({self._entries!r})"