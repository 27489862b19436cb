"""Sequences of edges packed four bits apiece into a 64-bit word."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Iterable, Iterator

from robopoker.constants import MAX_DEPTH_SUBGAME
from robopoker.edge import Edge

_U64 = 1 << 64
_MASK = _U64 - 1


@dataclass(frozen=True, order=True)
class Path:
    """A history of edges, first edge in the lowest nibble."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < _U64:
            raise ValueError(f"path value out of u64 range: {self.value}")

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> Path:
        """Pack at most MAX_DEPTH_SUBGAME edges."""
        value = 0
        for i, edge in enumerate(itertools.islice(edges, MAX_DEPTH_SUBGAME)):
            value |= edge.to_byte() << (4 * i)
        return cls(value)

    @classmethod
    def from_i64(cls, value: int) -> Path:
        return cls(value & _MASK)

    @classmethod
    def random(cls) -> Path:
        return cls(random.getrandbits(64))

    def length(self) -> int:
        return (3 + self.value.bit_length()) // 4

    def raises(self) -> int:
        """Aggressive edges since the last chance edge."""
        recent = itertools.takewhile(lambda e: e.is_choice(), reversed(self))
        return sum(1 for e in recent if e.is_aggro())

    def to_i64(self) -> int:
        return self.value - _U64 if self.value >= 1 << 63 else self.value

    def __int__(self) -> int:
        return self.value

    def __iter__(self) -> Iterator[Edge]:
        value = self.value
        while value and value & 0xF:
            yield Edge.from_byte(value & 0xF)
            value >>= 4

    def __reversed__(self) -> Iterator[Edge]:
        value = self.value
        while value:
            shift = ((value.bit_length() - 1) // 4) * 4
            nibble = (value >> shift) & 0xF
            if nibble == 0:
                return
            value &= ~(0xF << shift)
            yield Edge.from_byte(nibble)

    def __str__(self) -> str:
        return "".join(f".{edge}" for edge in self)