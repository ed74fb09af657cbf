"""32-bit wrapping sequence numbers and conversion to absolute 64-bit offsets."""

from __future__ import annotations

from dataclasses import dataclass

_MOD = 1 << 32
_MASK = _MOD - 1


@dataclass(frozen=True)
class WrappingInt32:
    """A sequence number that wraps around modulo 2**32."""

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK)

    def __add__(self, other: int) -> WrappingInt32:
        if not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other):
        """Subtracting an int moves backwards; subtracting a seqno gives the signed 32-bit distance."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK
            return diff - _MOD if diff >= (1 << 31) else diff
        if isinstance(other, int):
            return WrappingInt32(self.raw_value - other)
        return NotImplemented

    def __int__(self) -> int:
        return self.raw_value

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Convert an absolute sequence number to a wrapped one relative to ``isn``."""
    return isn + n


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number for ``n`` that lies closest to ``checkpoint``."""
    offset = (n.raw_value - isn.raw_value) & _MASK
    base = (checkpoint & ~_MASK) + offset
    candidates = [c for c in (base - _MOD, base, base + _MOD) if c >= 0]
    return min(candidates, key=lambda c: (abs(c - checkpoint), c))