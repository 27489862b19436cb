"""Random metric and histogram triples for exercising transport."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Dict, Tuple

from robopoker.heuristic import Heuristic
from robopoker.histogram import Histogram
from robopoker.metric import Metric
from robopoker.pair import Pair
from robopoker.sinkhorn import Sinkhorn


@dataclass
class EMD:
    """A metric together with three histograms over its abstractions."""

    metric: Metric
    p: Histogram
    q: Histogram
    r: Histogram

    @classmethod
    def random(cls) -> EMD:
        """Three random histograms and a random symmetric metric over their supports."""
        p = Histogram.random()
        q = Histogram.random()
        r = Histogram.random()
        support = list(itertools.chain(p.support(), q.support(), r.support()))
        distances: Dict[Pair, float] = {}
        for x in support:
            for y in support:
                if x > y:
                    distances[Pair.from_abstractions(x, y)] = random.random()
        return cls(Metric(distances), p, q, r)

    def sinkhorn(self) -> Sinkhorn:
        return Sinkhorn(self.p, self.q, self.metric).minimize()

    def heuristic(self) -> Heuristic:
        return Heuristic(self.p, self.q, self.metric).minimize()

    def inner(self) -> Tuple[Metric, Histogram, Histogram, Histogram]:
        return (self.metric, self.p, self.q, self.r)