import pytest

from robopoker.abstraction import Abstraction
from robopoker.equity import chisquare, distance, divergent, euclidean, variation
from robopoker.histogram import Histogram


def _point(p):
    return Histogram.from_abstractions([Abstraction.from_probability(p)])


def _full():
    return Histogram.from_abstractions(Abstraction.range())


def _mixed():
    return Histogram.from_abstractions(
        Abstraction.from_probability(p) for p in (0.2, 0.4, 0.4, 0.8)
    )


def test_distance_between_extremes_is_one():
    lo = Abstraction.from_probability(0.0)
    hi = Abstraction.from_probability(1.0)
    assert distance(lo, hi) == pytest.approx(1.0)
    assert distance(hi, lo) == distance(lo, hi)
    assert distance(lo, lo) == 0.0


def test_variation_is_zero_on_self():
    hist = _mixed()
    assert variation(hist, hist) == 0.0


def test_variation_is_symmetric_and_positive():
    a, b = _mixed(), _point(0.5)
    assert variation(a, b) == pytest.approx(variation(b, a))
    assert variation(a, b) > 0.0


def test_variation_grows_with_separation():
    base = _point(0.0)
    assert variation(base, _point(1.0)) > variation(base, _point(0.5))
    assert variation(base, _point(0.5)) > variation(base, _point(0.1))


def test_euclidean_properties():
    a, b = _mixed(), _point(0.9)
    assert euclidean(a, a) == 0.0
    assert euclidean(a, b) == pytest.approx(euclidean(b, a))
    assert euclidean(a, b) > 0.0


def test_divergent_of_disjoint_point_masses():
    assert divergent(_point(0.0), _point(1.0)) == pytest.approx(2.0)
    assert divergent(_mixed(), _mixed()) == 0.0


def test_chisquare_full_support():
    full = _full()
    assert chisquare(full, full) == 0.0
    other = _full().increment(Abstraction.from_probability(0.5))
    assert chisquare(full, other) > 0.0
    assert chisquare(full, other) == pytest.approx(chisquare(other, full))


def test_chisquare_uncovered_buckets_are_nan():
    assert str(chisquare(_point(0.3), _point(0.7))) == "nan"
    assert str(chisquare(_mixed(), _mixed())) == "nan"


def test_distance_rejects_learned_buckets():
    learned = Abstraction.random()
    with pytest.raises(ValueError):
        distance(learned, Abstraction.from_probability(0.5))