"""Distances between equity histograms over the [0, 1] interval."""

from __future__ import annotations

import itertools
import math

from robopoker.abstraction import Abstraction
from robopoker.histogram import Histogram


def distance(x: Abstraction, y: Abstraction) -> float:
    """Ground distance between two equity buckets."""
    return abs(float(x) - float(y))


def _densities(x: Histogram, y: Histogram):
    return ((x.density(a), y.density(a)) for a in Abstraction.range())


def variation(x: Histogram, y: Histogram) -> float:
    """Mean absolute difference of the cumulative distributions."""
    pairs = list(_densities(x, y))
    cdf_x = itertools.accumulate(p for p, _ in pairs)
    cdf_y = itertools.accumulate(q for _, q in pairs)
    return sum(abs(a - b) for a, b in zip(cdf_x, cdf_y)) / Abstraction.size()


def euclidean(x: Histogram, y: Histogram) -> float:
    return math.sqrt(sum((p - q) ** 2 for p, q in _densities(x, y)))


def chisquare(x: Histogram, y: Histogram) -> float:
    """Chi-square distance; NaN where neither histogram covers a bucket."""
    return sum(_chi(p, q) for p, q in _densities(x, y))


def _chi(p: float, q: float) -> float:
    total = p + q
    if total == 0:
        return math.nan
    return (p - q) ** 2 / total


def divergent(x: Histogram, y: Histogram) -> float:
    """Total absolute difference of densities."""
    return sum(abs(p - q) for p, q in _densities(x, y))