import pytest

from robopoker.odds import Odds


def test_grid_is_sorted_by_probability():
    snapped = [Odds.nearest(o.numer, o.denom) for o in Odds.GRID]
    assert snapped == list(Odds.GRID)
    probabilities = [Odds.__float__(o) for o in snapped]
    assert probabilities == sorted(probabilities)
    assert len(set(probabilities)) == len(probabilities)


def test_grid_has_ten_entries():
    assert len(Odds.GRID) == 10
    assert Odds.GRID[0] == Odds(1, 4)
    assert Odds.GRID[-1] == Odds(4, 1)


@pytest.mark.parametrize("odds", Odds.GRID)
def test_nearest_exact_grid_point(odds):
    assert Odds.nearest(odds.numer, odds.denom) == odds


def test_nearest_between_points_rounds_down():
    assert Odds.nearest(5, 8) == Odds(1, 2)


def test_nearest_below_grid_is_first():
    assert Odds.nearest(1, 100) == Odds.GRID[0]


def test_nearest_above_grid_is_last():
    assert Odds.nearest(100, 1) == Odds.GRID[-1]


def test_nearest_infinite_is_last():
    assert Odds.nearest(1, 0) == Odds.GRID[-1]


def test_nearest_nan_raises():
    with pytest.raises(ValueError):
        Odds.nearest(0, 0)


def test_from_pair_runs_euclid():
    assert Odds.from_pair(6, 4) == Odds(2, 0)


def test_from_pair_with_zero_denominator():
    assert Odds.from_pair(7, 0) == Odds(7, 0)


def test_float_of_even_odds():
    assert float(Odds(1, 1)) == 1.0


def test_str_quarter_pot():
    assert str(Odds(1, 4)) == "+4"


def test_str_overbet():
    assert str(Odds(3, 2)) == "-2"


@pytest.mark.parametrize("odds", Odds.GRID)
def test_str_sign_follows_size(odds):
    snapped = Odds.nearest(odds.numer, odds.denom)
    text = snapped.__str__()
    if snapped.__float__() > 1.0:
        assert text.startswith("-")
    else:
        assert text.startswith("+")
    assert int(text[1:]) >= 1


def test_random_is_on_grid():
    for _ in range(50):
        assert Odds.random() in Odds.GRID


def test_raise_subsets_are_on_grid():
    for subset in (Odds.FLOP_RAISES, Odds.LATE_RAISES, Odds.LAST_RAISES):
        assert [Odds.nearest(o.numer, o.denom) for o in subset] == list(subset)