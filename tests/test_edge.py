import pytest

from robopoker.edge import Edge, EdgeKind
from robopoker.odds import Odds

SIMPLE = [Edge(EdgeKind.DRAW), Edge(EdgeKind.FOLD), Edge(EdgeKind.CHECK), Edge(EdgeKind.CALL), Edge(EdgeKind.SHOVE)]
RAISES = [Edge.raise_(o) for o in Odds.GRID]


def test_bijective_byte():
    assert all(edge == Edge.from_byte(edge.to_byte()) for edge in SIMPLE + RAISES)


def test_bijective_u64():
    assert all(edge == Edge.from_u64(edge.to_u64()) for edge in SIMPLE + RAISES)


def test_byte_values():
    assert [e.to_byte() for e in SIMPLE] == [1, 2, 3, 4, 5]
    assert [e.to_byte() for e in RAISES] == list(range(6, 16))


def test_u64_raise_layout():
    edge = Edge.raise_(Odds(3, 2))
    assert edge.to_u64() == 4 | (3 << 3) | (2 << 11)


def test_u64_off_grid_raise_round_trips():
    edge = Edge.raise_(Odds(5, 7))
    assert Edge.from_u64(edge.to_u64()) == edge


def test_byte_off_grid_raise_fails():
    with pytest.raises(ValueError):
        Edge.raise_(Odds(5, 7)).to_byte()


@pytest.mark.parametrize("value", [0, 16, 255])
def test_from_byte_invalid(value):
    with pytest.raises(ValueError):
        Edge.from_byte(value)


@pytest.mark.parametrize("value", [6, 7])
def test_from_u64_invalid(value):
    with pytest.raises(ValueError):
        Edge.from_u64(value)


def test_raise_requires_odds():
    with pytest.raises(ValueError):
        Edge(EdgeKind.RAISE)


def test_non_raise_rejects_odds():
    with pytest.raises(ValueError):
        Edge(EdgeKind.FOLD, Odds(1, 1))


def test_predicates():
    shove = Edge(EdgeKind.SHOVE)
    draw = Edge(EdgeKind.DRAW)
    raise_ = Edge.raise_(Odds(1, 2))
    check = Edge(EdgeKind.CHECK)
    assert shove.is_shove() and shove.is_aggro() and shove.is_choice()
    assert raise_.is_raise() and raise_.is_aggro() and not raise_.is_shove()
    assert draw.is_chance() and not draw.is_choice() and not draw.is_aggro()
    assert check.is_choice() and not check.is_aggro()


def test_str():
    assert [str(e) for e in SIMPLE] == ["?", "F", "O", "*", "!"]
    assert str(Edge.raise_(Odds(1, 4))) == str(Odds(1, 4))


def test_ordering_follows_variant_order():
    ordered = sorted([Edge(EdgeKind.SHOVE), Edge.raise_(Odds(1, 1)), Edge(EdgeKind.DRAW)])
    assert ordered == [Edge(EdgeKind.DRAW), Edge.raise_(Odds(1, 1)), Edge(EdgeKind.SHOVE)]


def test_random_round_trips():
    for _ in range(100):
        edge = Edge.random()
        assert Edge.from_byte(edge.to_byte()) == edge