"""Order-free identifiers for pairs of abstractions."""

from __future__ import annotations

from dataclasses import dataclass

from robopoker.abstraction import Abstraction

_U64 = 1 << 64
_MASK = _U64 - 1


@dataclass(frozen=True, order=True)
class Pair:
    """The XOR of two abstractions' 64-bit encodings."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < _U64:
            raise ValueError(f"pair value out of u64 range: {self.value}")

    @classmethod
    def from_abstractions(cls, a: Abstraction, b: Abstraction) -> Pair:
        return cls(int(a) ^ int(b))

    @classmethod
    def from_i64(cls, value: int) -> Pair:
        return cls(value & _MASK)

    def to_i64(self) -> int:
        return self.value - _U64 if self.value >= 1 << 63 else self.value

    def __int__(self) -> int:
        return self.value