import pytest

from robopoker import equity
from robopoker.abstraction import Abstraction, Street
from robopoker.histogram import Histogram
from robopoker.metric import Metric
from robopoker.pair import Pair
from robopoker.sinkhorn import Sinkhorn


def _learned(i):
    return Abstraction.from_index(Street.FLOP, i)


def _bucket(i):
    return Abstraction.from_index(Street.RIVE, i)


def _learned_metric():
    a, b, c = _learned(0), _learned(1), _learned(2)
    return Metric(
        {
            Pair.from_abstractions(a, b): 2.0,
            Pair.from_abstractions(a, c): 4.0,
            Pair.from_abstractions(b, c): 3.0,
        }
    )


def test_distance_to_self_is_zero():
    assert Metric().distance(_learned(3), _learned(3)) == 0.0


def test_learned_distances_are_scaled_by_largest():
    a, b, c = _learned(0), _learned(1), _learned(2)
    metric = _learned_metric()
    assert metric.distance(a, c) == 1.0
    assert metric.distance(a, b) * 2 == pytest.approx(metric.distance(a, c))


def test_learned_distance_is_symmetric():
    metric = _learned_metric()
    assert metric.distance(_learned(1), _learned(2)) == metric.distance(_learned(2), _learned(1))


def test_missing_pair_raises():
    with pytest.raises(KeyError):
        _learned_metric().distance(_learned(0), _learned(9))


def test_percent_distance_matches_equity():
    a, b = _bucket(10), _bucket(70)
    assert Metric().distance(a, b) == equity.distance(a, b)


def test_preflop_distance_raises():
    x = Abstraction.from_index(Street.PREF, 1)
    y = Abstraction.from_index(Street.PREF, 2)
    with pytest.raises(ValueError):
        Metric().distance(x, y)


def test_mixed_kinds_raise():
    with pytest.raises(ValueError):
        Metric().distance(_learned(1), _bucket(1))


def test_emd_percent_equals_variation():
    h1 = Histogram.from_abstractions([_bucket(10), _bucket(20), _bucket(20)])
    h2 = Histogram.from_abstractions([_bucket(50), _bucket(90)])
    assert Metric().emd(h1, h2) == equity.variation(h1, h2)


def test_emd_percent_self_is_zero():
    h = Histogram.from_abstractions([_bucket(10), _bucket(40)])
    assert Metric().emd(h, h) == 0.0


def test_emd_learned_matches_sinkhorn():
    metric = _learned_metric()
    h1 = Histogram.from_abstractions([_learned(0), _learned(1)])
    h2 = Histogram.from_abstractions([_learned(2)])
    expected = Sinkhorn(h1, h2, metric).minimize().cost()
    assert metric.emd(h1, h2) == pytest.approx(expected)


def test_emd_preflop_raises():
    h = Histogram.from_abstractions([Abstraction.from_index(Street.PREF, 0)])
    with pytest.raises(ValueError):
        Metric().emd(h, h)


def test_empty_metric_street_is_river():
    assert Metric().street() is Street.RIVE


@pytest.mark.parametrize("street", [Street.TURN, Street.FLOP])
def test_street_from_pair_count(street):
    k = street.k()
    count = k * (k - 1) // 2
    metric = Metric({Pair(i): 1.0 for i in range(1, count + 1)})
    assert len(metric) == count
    assert metric.street() is street


def test_unrecognised_count_defaults_to_river():
    metric = Metric({Pair(1): 1.0, Pair(2): 2.0, Pair(3): 3.0})
    assert metric.street() is Street.RIVE