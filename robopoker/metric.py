"""Ground distances between abstractions and transport distances between histograms."""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional, Tuple

from robopoker import equity
from robopoker.abstraction import Abstraction, AbstractionKind, Street
from robopoker.histogram import Histogram
from robopoker.pair import Pair
from robopoker.sinkhorn import Sinkhorn

_MIN_POSITIVE = 1.1754944e-38


def _choose_2(k: int) -> int:
    return k * max(k - 1, 0) // 2


class Metric:
    """Distance metric for kmeans clustering.

    Holds the distances between abstractions of the previous layer, scaled so
    that the largest is 1, and measures distances between histograms of the
    current layer.
    """

    def __init__(self, distances: Optional[Mapping[Pair, float]] = None) -> None:
        entries = dict(distances or {})
        scale = max(_MIN_POSITIVE, *entries.values()) if entries else _MIN_POSITIVE
        self._distances: Dict[Pair, float] = {
            pair: value / scale for pair, value in sorted(entries.items())
        }

    def distance(self, x: Abstraction, y: Abstraction) -> float:
        """Ground distance between two abstractions of the same kind."""
        if x == y:
            return 0.0
        if x.kind is AbstractionKind.LEARNED and y.kind is AbstractionKind.LEARNED:
            return self._lookup(x, y)
        if x.kind is AbstractionKind.PERCENT and y.kind is AbstractionKind.PERCENT:
            return equity.distance(x, y)
        if x.kind is AbstractionKind.PREFLOP and y.kind is AbstractionKind.PREFLOP:
            raise ValueError("no preflop distance")
        raise ValueError(f"no distance between {x} and {y}")

    def _lookup(self, x: Abstraction, y: Abstraction) -> float:
        try:
            return self._distances[Pair.from_abstractions(x, y)]
        except KeyError:
            raise KeyError(f"missing abstraction pair {x} {y}") from None

    def emd(self, source: Histogram, target: Histogram) -> float:
        """Earth mover's distance between two histograms."""
        kind = source.peek().kind
        if kind is AbstractionKind.LEARNED:
            return Sinkhorn(source, target, self).minimize().cost()
        if kind is AbstractionKind.PERCENT:
            return equity.variation(source, target)
        raise ValueError("no preflop emd")

    def street(self) -> Street:
        """The street whose pairwise cluster count matches the table size."""
        n = len(self._distances)
        for street in (Street.RIVE, Street.TURN, Street.FLOP, Street.PREF):
            if n == _choose_2(street.k()):
                return street
        return Street.RIVE

    def items(self) -> Iterator[Tuple[Pair, float]]:
        return iter(self._distances.items())

    def __len__(self) -> int:
        return len(self._distances)

    def __repr__(self) -> str:
        return f"Metric({len(self._distances)} pairs)"