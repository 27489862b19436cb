"""Greedy nearest-target approximation of optimal transport."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from robopoker.abstraction import Abstraction
from robopoker.histogram import Histogram
from robopoker.pair import Pair
from robopoker.potential import Potential

if TYPE_CHECKING:
    from robopoker.metric import Metric


class Heuristic:
    """Greedy bipartite matching of source mass to its nearest target mass.

    Each pass moves as much mass as possible from every remaining source to its
    nearest remaining target. This is O(N * M), and far from optimal in the
    worst case.
    """

    def __init__(self, source: Histogram, target: Histogram, metric: Metric) -> None:
        self._plan: Dict[Pair, float] = {}
        self._metric = metric
        self._source = source
        self._target = target

    def cost(self) -> float:
        return sum(self._plan.values())

    def flow(self, x: Abstraction, y: Abstraction) -> float:
        try:
            return self._plan[Pair.from_abstractions(x, y)]
        except KeyError:
            raise KeyError("missing in transport plan") from None

    def minimize(self) -> Heuristic:
        """Build the greedy transport plan; returns self."""
        self._plan.clear()
        pile = Potential.normalize(self._source)
        sink = Potential.normalize(self._target)
        while any(dx > 0 for dx in pile.values()):
            sources = [x for x, dx in pile.items() if dx > 0]
            for x in sources:
                targets = [y for y, dy in sink.items() if dy > 0]
                if not targets:
                    return self
                y = min(targets, key=lambda t: self._metric.distance(x, t))
                distance = self._metric.distance(x, y)
                mass = min(pile.density(x), sink.density(y))
                pile.increment(x, -mass)
                sink.increment(y, -mass)
                pair = Pair.from_abstractions(x, y)
                self._plan[pair] = self._plan.get(pair, 0.0) + mass * distance
        return self