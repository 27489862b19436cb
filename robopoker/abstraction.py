"""Streets and the abstraction buckets that stand for groups of observations."""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List

from robopoker.constants import (
    KMEANS_EQTY_CLUSTER_COUNT,
    KMEANS_FLOP_CLUSTER_COUNT,
    KMEANS_TURN_CLUSTER_COUNT,
)

_U64 = 1 << 64
_MASK64 = _U64 - 1

_H = 0xFF00000000000000  # street mask
_M = 0x00FFFFFFFFFFF000  # hash mask
_L = 0x0000000000000FFF  # index mask
_STREET_SHIFT = 56
_INDEX_BITS = 12
_GOLDEN = 0x9E3779B97F4A7C15

_N = KMEANS_EQTY_CLUSTER_COUNT - 1
_DELIM = "::"
_HEX = re.compile(r"\+?[0-9a-fA-F]+")

_PREFLOP_HANDS = 169


class Street(IntEnum):
    """Betting rounds, in order of play."""

    PREF = 0
    FLOP = 1
    TURN = 2
    RIVE = 3

    def k(self) -> int:
        """Number of abstraction buckets on this street."""
        return _CLUSTER_COUNTS[self]

    @classmethod
    def parse(cls, text: str) -> Street:
        key = text.strip().lower()
        for street, names in _STREET_NAMES.items():
            if key in names:
                return street
        raise ValueError(f"invalid street: {text!r}")

    def __str__(self) -> str:
        return _STREET_DISPLAY[self]


_CLUSTER_COUNTS = {
    Street.PREF: _PREFLOP_HANDS,
    Street.FLOP: KMEANS_FLOP_CLUSTER_COUNT,
    Street.TURN: KMEANS_TURN_CLUSTER_COUNT,
    Street.RIVE: KMEANS_EQTY_CLUSTER_COUNT,
}
_STREET_DISPLAY = {
    Street.PREF: "Preflop",
    Street.FLOP: "Flop",
    Street.TURN: "Turn",
    Street.RIVE: "River",
}
_STREET_NAMES = {
    Street.PREF: {"p", "pref", "preflop"},
    Street.FLOP: {"f", "flop"},
    Street.TURN: {"t", "turn"},
    Street.RIVE: {"r", "rive", "river"},
}


class AbstractionKind(IntEnum):
    PERCENT = 0  # river
    LEARNED = 1  # flop, turn
    PREFLOP = 2  # preflop


_KIND_OF_STREET = {
    Street.PREF: AbstractionKind.PREFLOP,
    Street.FLOP: AbstractionKind.LEARNED,
    Street.TURN: AbstractionKind.LEARNED,
    Street.RIVE: AbstractionKind.PERCENT,
}


def quantize(p: float) -> int:
    """Equity bucket nearest to probability p."""
    x = p * _N
    return int(math.floor(x + 0.5)) if x >= 0 else int(math.ceil(x - 0.5))


def floatize(q: int) -> float:
    """Probability at the centre of equity bucket q."""
    return q / _N


def _signature(street: Street, index: int) -> int:
    bits = _L & index
    bits |= int(street) << _INDEX_BITS
    bits = (bits * _GOLDEN) & _MASK64
    return _M & bits


def _street_tag(n: int) -> int:
    return (_H & n) >> _STREET_SHIFT


@dataclass(frozen=True, order=True)
class Abstraction:
    """A bucket label: street tag, hash signature and index packed into 64 bits."""

    kind: AbstractionKind
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < _U64:
            raise ValueError(f"abstraction value out of u64 range: {self.value}")

    @classmethod
    def from_index(cls, street: Street, index: int) -> Abstraction:
        street = Street(street)
        bits = _L & index
        bits |= _M & _signature(street, index)
        bits |= _H & (int(street) << _STREET_SHIFT)
        return cls(_KIND_OF_STREET[street], bits)

    @classmethod
    def from_probability(cls, p: float) -> Abstraction:
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"probability out of [0, 1]: {p}")
        return cls.from_index(Street.RIVE, quantize(p))

    @classmethod
    def from_int(cls, n: int) -> Abstraction:
        if not 0 <= n < _U64:
            raise ValueError(f"abstraction value out of u64 range: {n}")
        tag = _street_tag(n)
        if tag > int(Street.RIVE):
            raise ValueError(f"invalid street value {tag}")
        return cls(_KIND_OF_STREET[Street(tag)], n)

    @classmethod
    def from_i64(cls, n: int) -> Abstraction:
        return cls.from_int(n & _MASK64)

    @classmethod
    def parse(cls, text: str) -> Abstraction:
        parts = text.strip().split(_DELIM)
        if len(parts) < 2:
            raise ValueError("broken delimiter")
        street = Street.parse(parts[0])
        if not _HEX.fullmatch(parts[1]):
            raise ValueError(f"invalid index: {parts[1]!r}")
        return cls.from_index(street, int(parts[1], 16))

    @classmethod
    def size(cls) -> int:
        return KMEANS_EQTY_CLUSTER_COUNT

    @classmethod
    def range(cls) -> Iterator[Abstraction]:
        """Every river equity bucket, from 0% to 100%."""
        for i in range(_N + 1):
            yield cls.from_index(Street.RIVE, i)

    @classmethod
    def all(cls, street: Street) -> List[Abstraction]:
        street = Street(street)
        if street is Street.RIVE:
            return list(cls.range())
        return [cls.from_index(street, i) for i in range(street.k())]

    @classmethod
    def random(cls) -> Abstraction:
        street = Street.FLOP
        return cls.from_index(street, random.randrange(street.k()))

    def street(self) -> Street:
        tag = _street_tag(self.value)
        if tag > int(Street.RIVE):
            raise ValueError(f"invalid street value {tag}")
        return Street(tag)

    def index(self) -> int:
        return _L & self.value

    def to_i64(self) -> int:
        return self.value - _U64 if self.value >= 1 << 63 else self.value

    def __int__(self) -> int:
        return self.value

    def __float__(self) -> float:
        if self.kind is AbstractionKind.LEARNED:
            raise ValueError("no cluster into probability")
        if self.kind is AbstractionKind.PREFLOP:
            raise ValueError("no preflop into probability")
        return floatize(self.index())

    def __str__(self) -> str:
        return f"{str(self.street())[0].upper()}{_DELIM}{self.index():02x}"