"""Immutable signed lengths of time."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from typing_extensions import override

from timewise.errors import InvalidDurationError
from timewise.format import humanize as format_humanize
from timewise.parse import is_duration_input, normalize_to_millis, parse_duration
from timewise.units import DurationInput
from timewise.util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR


@dataclass(frozen=True, eq=False)
class Duration:
    """A signed length of time stored as milliseconds.

    Every operation returns a new Duration. Anywhere another duration is
    accepted, a duration string such as "30m" or "1h30m" works too:

        >>> Duration.hours(1) + "30m"
        Duration(millis=5400000.0)
        >>> str(Duration.parse("36h"))
        '2d'
    """

    millis: float

    def __post_init__(self) -> None:
        if isinstance(self.millis, bool) or not isinstance(self.millis, (int, float)):
            raise TypeError(
                f"Duration expects a number of milliseconds, "
                f"got {type(self.millis).__name__!r}.\n"
                f"Hint: use Duration.parse('1h30m') or dur('1h30m') for strings"
            )
        object.__setattr__(self, "millis", float(self.millis))

    # Factories

    @classmethod
    def parse(cls, text: str) -> "Duration":
        return cls(parse_duration(text))

    @classmethod
    def milliseconds(cls, n: float) -> "Duration":
        return cls(n)

    @classmethod
    def seconds(cls, n: float) -> "Duration":
        return cls(n * SECOND)

    @classmethod
    def minutes(cls, n: float) -> "Duration":
        return cls(n * MINUTE)

    @classmethod
    def hours(cls, n: float) -> "Duration":
        return cls(n * HOUR)

    @classmethod
    def days(cls, n: float) -> "Duration":
        return cls(n * DAY)

    @classmethod
    def weeks(cls, n: float) -> "Duration":
        return cls(n * WEEK)

    @classmethod
    def months(cls, n: float) -> "Duration":
        """Approximate months (a twelfth of a 365.25-day year)."""
        return cls(n * MONTH)

    @classmethod
    def years(cls, n: float) -> "Duration":
        """Approximate years (365.25 days)."""
        return cls(n * YEAR)

    @classmethod
    def zero(cls) -> "Duration":
        return cls(0)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        return cls(delta / timedelta(milliseconds=1))

    # Arithmetic

    def add(self, other: DurationInput) -> "Duration":
        return Duration(self.millis + normalize_to_millis(other))

    def subtract(self, other: DurationInput) -> "Duration":
        return Duration(self.millis - normalize_to_millis(other))

    def multiply(self, n: float) -> "Duration":
        return Duration(self.millis * n)

    def divide(self, n: float) -> "Duration":
        if n == 0:
            raise ZeroDivisionError("Cannot divide duration by zero")
        return Duration(self.millis / n)

    def negate(self) -> "Duration":
        return Duration(-self.millis)

    def __add__(self, other: Any) -> "Duration":
        if not _accepts(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Duration":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Duration":
        if not _accepts(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "Duration":
        if not _accepts(other):
            return NotImplemented
        return Duration(normalize_to_millis(other) - self.millis)

    def __mul__(self, n: Any) -> "Duration":
        if not _is_scalar(n):
            return NotImplemented
        return self.multiply(n)

    def __rmul__(self, n: Any) -> "Duration":
        return self.__mul__(n)

    def __truediv__(self, n: Any) -> "Duration":
        if not _is_scalar(n):
            return NotImplemented
        return self.divide(n)

    def __neg__(self) -> "Duration":
        return self.negate()

    def __abs__(self) -> "Duration":
        return Duration(abs(self.millis))

    # Comparison

    @override
    def __eq__(self, other: object) -> bool:
        if not _accepts(other):
            return NotImplemented
        try:
            return self.millis == normalize_to_millis(other)
        except InvalidDurationError:
            # Unparseable text is simply not equal; ordering still raises
            return False

    @override
    def __hash__(self) -> int:
        return hash(self.millis)

    def __lt__(self, other: Any) -> bool:
        if not _accepts(other):
            return NotImplemented
        return self.millis < normalize_to_millis(other)

    def __le__(self, other: Any) -> bool:
        if not _accepts(other):
            return NotImplemented
        return self.millis <= normalize_to_millis(other)

    def __gt__(self, other: Any) -> bool:
        if not _accepts(other):
            return NotImplemented
        return self.millis > normalize_to_millis(other)

    def __ge__(self, other: Any) -> bool:
        if not _accepts(other):
            return NotImplemented
        return self.millis >= normalize_to_millis(other)

    def is_zero(self) -> bool:
        return self.millis == 0

    def is_negative(self) -> bool:
        return self.millis < 0

    def is_positive(self) -> bool:
        return self.millis > 0

    # Conversions (exact, unrounded)

    def to_millis(self) -> float:
        return self.millis

    def to_seconds(self) -> float:
        return self.millis / SECOND

    def to_minutes(self) -> float:
        return self.millis / MINUTE

    def to_hours(self) -> float:
        return self.millis / HOUR

    def to_days(self) -> float:
        return self.millis / DAY

    def to_weeks(self) -> float:
        return self.millis / WEEK

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.millis)

    # Display

    def humanize(self, *, long: bool = False) -> str:
        """Rounded, unit-labeled text such as '5m' or '5 minutes'."""
        return format_humanize(self.millis, long=long)

    @override
    def __str__(self) -> str:
        return self.humanize()


def _accepts(other: Any) -> bool:
    return is_duration_input(other)


def _is_scalar(n: Any) -> bool:
    return isinstance(n, (int, float)) and not isinstance(n, bool)


def dur(text: str) -> Duration:
    """Shortcut for Duration.parse().

    Example:
        >>> dur("1h30m").to_minutes()
        90.0
    """
    return Duration.parse(text)
