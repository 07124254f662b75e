"""Nominal wrappers that keep seconds and milliseconds apart.

A bare int says nothing about its unit. Seconds and Milliseconds are distinct
types, so a type checker rejects passing one where the other is expected, and
at runtime they never compare equal to each other or to plain numbers.
"""

from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

from typing_extensions import Self, override


@dataclass(frozen=True, order=True)
class Seconds:
    value: int

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __add__(self, other: Self) -> Self:
        if not isinstance(other, Seconds):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self, other: Self) -> Self:
        if not isinstance(other, Seconds):
            return NotImplemented
        return type(self)(self.value - other.value)

    @override
    def __str__(self) -> str:
        return f"{self.value}s"


@dataclass(frozen=True, order=True)
class Milliseconds:
    value: int

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __add__(self, other: Self) -> Self:
        if not isinstance(other, Milliseconds):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self, other: Self) -> Self:
        if not isinstance(other, Milliseconds):
            return NotImplemented
        return type(self)(self.value - other.value)

    @override
    def __str__(self) -> str:
        return f"{self.value}ms"


@runtime_checkable
class DurationLike(Protocol):
    def to_millis(self) -> float: ...


# What every duration-accepting operation takes: text like "1h30m" or a Duration
DurationInput: TypeAlias = "str | DurationLike"
