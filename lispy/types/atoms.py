"""Scalar values: 64-bit integers and booleans."""

from __future__ import annotations

from dataclasses import dataclass

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(n: int) -> int:
    """Reduce an unbounded Python int to the signed 64-bit range (two's complement)."""
    return ((n - INT64_MIN) & 0xFFFFFFFFFFFFFFFF) + INT64_MIN


@dataclass(frozen=True)
class Number:
    value: int

    type_name = "Number"

    def __post_init__(self):
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise OverflowError(f"{self.value} does not fit in 64 bits")

    def copy(self) -> Number:
        return self

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Bool:
    value: bool

    type_name = "Boolean"

    def copy(self) -> Bool:
        return self

    def __str__(self) -> str:
        return "t" if self.value else "false"
