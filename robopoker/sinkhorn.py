"""Entropy-regularised optimal transport by Sinkhorn scaling."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Dict

from robopoker.abstraction import Abstraction
from robopoker.constants import (
    SINKHORN_ITERATIONS,
    SINKHORN_TEMPERATURE,
    SINKHORN_TOLERANCE,
)
from robopoker.histogram import Histogram
from robopoker.potential import Potential

if TYPE_CHECKING:
    from robopoker.metric import Metric

_MIN_POSITIVE = 1.1754944e-38


class Sinkhorn:
    """Transport between two histograms through a pair of log-space potentials."""

    def __init__(self, mu: Histogram, nu: Histogram, metric: Metric) -> None:
        self._metric = metric
        self._mu = mu
        self._nu = nu
        self._lhs = Potential.uniform(mu)
        self._rhs = Potential.uniform(nu)

    def minimize(self) -> Sinkhorn:
        """Scale the potentials until they settle; returns self."""
        for _ in range(SINKHORN_ITERATIONS):
            lhs = self._scaled(self._lhs, self._mu, self._rhs, "lhs")
            lhs_err = _delta(self._lhs, lhs)
            self._lhs = lhs
            rhs = self._scaled(self._rhs, self._nu, self._lhs, "rhs")
            rhs_err = _delta(self._rhs, rhs)
            self._rhs = rhs
            if lhs_err + rhs_err < SINKHORN_TOLERANCE:
                break
        return self

    def flow(self, x: Abstraction, y: Abstraction) -> float:
        """Cost carried by the coupling between x and y."""
        return self._coupling(x, y) * self._metric.distance(x, y)

    def cost(self) -> float:
        """Total transport cost of the current coupling."""
        total = 0.0
        for x in self._lhs.support():
            for y in self._rhs.support():
                flow = self.flow(x, y)
                if not math.isfinite(flow):
                    raise ValueError("transport flow overflow")
                total += flow
        return total

    def _scaled(
        self, side: Potential, histogram: Histogram, other: Potential, name: str
    ) -> Potential:
        entries: Dict[Abstraction, float] = {}
        for x in side.support():
            value = self._divergence(x, histogram, other)
            if not math.isfinite(value):
                raise ValueError(f"{name} entropy overflow")
            entries[x] = value
        return Potential(entries)

    def _divergence(self, x: Abstraction, histogram: Histogram, potential: Potential) -> float:
        partition = sum(
            max(math.exp(potential.density(y) - self._regularization(x, y)), _MIN_POSITIVE)
            for y in potential.support()
        )
        return math.log(histogram.density(x)) - math.log(partition)

    def _coupling(self, x: Abstraction, y: Abstraction) -> float:
        return math.exp(
            self._lhs.density(x) + self._rhs.density(y) - self._regularization(x, y)
        )

    def _regularization(self, x: Abstraction, y: Abstraction) -> float:
        return self._metric.distance(x, y) / SINKHORN_TEMPERATURE


def _delta(prev: Potential, next_: Potential) -> float:
    return sum(
        abs(math.exp(next_.density(x)) - math.exp(prev.density(x))) for x in prev.support()
    )