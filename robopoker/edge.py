"""Abstract edges of the game tree."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from robopoker.odds import Odds


class EdgeKind(IntEnum):
    DRAW = 0
    FOLD = 1
    CHECK = 2
    CALL = 3
    RAISE = 4
    SHOVE = 5


_BYTE_OF_KIND = {
    EdgeKind.DRAW: 1,
    EdgeKind.FOLD: 2,
    EdgeKind.CHECK: 3,
    EdgeKind.CALL: 4,
    EdgeKind.SHOVE: 5,
}
_KIND_OF_BYTE = {byte: kind for kind, byte in _BYTE_OF_KIND.items()}
_RAISE_BYTE = 6

_U64_OF_KIND = {
    EdgeKind.DRAW: 0,
    EdgeKind.FOLD: 1,
    EdgeKind.CHECK: 2,
    EdgeKind.CALL: 3,
    EdgeKind.SHOVE: 5,
}
_KIND_OF_U64 = {tag: kind for kind, tag in _U64_OF_KIND.items()}
_RAISE_TAG = 4

_SYMBOLS = {
    EdgeKind.DRAW: "?",
    EdgeKind.FOLD: "F",
    EdgeKind.CALL: "*",
    EdgeKind.CHECK: "O",
    EdgeKind.SHOVE: "!",
}


@dataclass(frozen=True, order=True)
class Edge:
    """A game tree edge; raises carry pot-relative odds."""

    kind: EdgeKind
    odds: Optional[Odds] = None

    def __post_init__(self) -> None:
        if self.kind is EdgeKind.RAISE and self.odds is None:
            raise ValueError("raise edge requires odds")
        if self.kind is not EdgeKind.RAISE and self.odds is not None:
            raise ValueError(f"{self.kind.name.lower()} edge takes no odds")

    @classmethod
    def raise_(cls, odds: Odds) -> Edge:
        return cls(EdgeKind.RAISE, odds)

    def is_shove(self) -> bool:
        return self.kind is EdgeKind.SHOVE

    def is_raise(self) -> bool:
        return self.kind is EdgeKind.RAISE

    def is_chance(self) -> bool:
        return self.kind is EdgeKind.DRAW

    def is_aggro(self) -> bool:
        return self.is_raise() or self.is_shove()

    def is_choice(self) -> bool:
        return not self.is_chance()

    def to_byte(self) -> int:
        """Compact encoding; raises are indexed into the odds grid."""
        if self.kind is EdgeKind.RAISE:
            try:
                return _RAISE_BYTE + Odds.GRID.index(self.odds)
            except ValueError:
                raise ValueError(f"invalid odds value {self.odds!r}") from None
        return _BYTE_OF_KIND[self.kind]

    @classmethod
    def from_byte(cls, value: int) -> Edge:
        if value in _KIND_OF_BYTE:
            return cls(_KIND_OF_BYTE[value])
        if _RAISE_BYTE <= value < _RAISE_BYTE + len(Odds.GRID):
            return cls.raise_(Odds.GRID[value - _RAISE_BYTE])
        raise ValueError(f"invalid edge encoding {value}")

    def to_u64(self) -> int:
        """Encoding with a 3-bit tag and raw raise odds."""
        if self.kind is EdgeKind.RAISE:
            assert self.odds is not None
            numer = self.odds.numer & 0xFFFF
            denom = self.odds.denom & 0xFFFF
            return _RAISE_TAG | (numer << 3) | (denom << 11)
        return _U64_OF_KIND[self.kind]

    @classmethod
    def from_u64(cls, value: int) -> Edge:
        tag = value & 0b111
        if tag == _RAISE_TAG:
            return cls.raise_(Odds((value >> 3) & 0xFF, (value >> 11) & 0xFF))
        if tag in _KIND_OF_U64:
            return cls(_KIND_OF_U64[tag])
        raise ValueError(f"invalid edge tag {tag}")

    @classmethod
    def random(cls) -> Edge:
        choice = random.randrange(6)
        if choice == 5:
            return cls.raise_(Odds.random())
        return cls(
            (EdgeKind.DRAW, EdgeKind.FOLD, EdgeKind.CHECK, EdgeKind.CALL, EdgeKind.SHOVE)[choice]
        )

    def __str__(self) -> str:
        if self.kind is EdgeKind.RAISE:
            return str(self.odds)
        return _SYMBOLS[self.kind]