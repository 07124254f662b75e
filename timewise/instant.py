"""Immutable points in time on the Unix epoch-millisecond axis."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from dateutil.parser import isoparse
from typing_extensions import override

from timewise import clock
from timewise.duration import Duration
from timewise.errors import InvalidTimestampError
from timewise.format import format_relative
from timewise.parse import is_duration_input, normalize_to_millis
from timewise.units import DurationInput, Milliseconds, Seconds
from timewise.util import SECOND

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True, order=True)
class Instant:
    """A Unix timestamp in whole milliseconds.

    Factories are explicit about units, so seconds and milliseconds cannot be
    mixed up at construction time:

        >>> Instant.from_seconds(1704067200).to_iso()
        '2024-01-01T00:00:00.000Z'
        >>> Instant.from_millis(1704067200000) == Instant.from_seconds(1704067200)
        True

    Anything relative to "now" reads timewise.clock afresh on every call.
    """

    millis: int

    def __post_init__(self) -> None:
        if isinstance(self.millis, bool) or not isinstance(self.millis, (int, float)):
            raise TypeError(
                f"Instant expects a Unix timestamp in milliseconds, "
                f"got {type(self.millis).__name__!r}.\n"
                f"Hint: use Instant.from_datetime() or Instant.from_iso()"
            )
        object.__setattr__(self, "millis", math.floor(self.millis))

    # Factories

    @classmethod
    def now(cls) -> "Instant":
        return cls(clock.now_millis())

    @classmethod
    def from_seconds(cls, unix: float) -> "Instant":
        return cls(unix * SECOND)

    @classmethod
    def from_millis(cls, unix: float) -> "Instant":
        return cls(unix)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        return cls(_datetime_millis(dt))

    @classmethod
    def from_iso(cls, text: str) -> "Instant":
        """Parse an ISO-8601 timestamp. Text without an offset is read as UTC."""
        try:
            dt = isoparse(text)
        except (ValueError, OverflowError) as e:
            raise InvalidTimestampError(
                f"Invalid ISO date string: '{text}'", input=text
            ) from e
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls(_datetime_millis(dt))

    @classmethod
    def from_now(cls, duration: DurationInput) -> "Instant":
        """The instant `duration` after now."""
        return cls(clock.now_millis() + normalize_to_millis(duration))

    @classmethod
    def ago(cls, duration: DurationInput) -> "Instant":
        """The instant `duration` before now."""
        return cls(clock.now_millis() - normalize_to_millis(duration))

    # Arithmetic

    def add(self, duration: DurationInput) -> "Instant":
        return Instant(self.millis + normalize_to_millis(duration))

    def subtract(self, duration: DurationInput) -> "Instant":
        return Instant(self.millis - normalize_to_millis(duration))

    def diff(self, other: "Instant | datetime") -> Duration:
        """Signed distance from other to self."""
        return Duration(self.millis - _millis_of(other))

    def __add__(self, other: Any) -> "Instant":
        if not is_duration_input(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Instant":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Instant | Duration":
        if isinstance(other, (Instant, datetime)):
            return self.diff(other)
        if is_duration_input(other):
            return self.subtract(other)
        return NotImplemented

    # Comparison

    def is_before(self, other: "Instant | datetime") -> bool:
        return self.millis < _millis_of(other)

    def is_after(self, other: "Instant | datetime") -> bool:
        return self.millis > _millis_of(other)

    def equals(self, other: "Instant | datetime") -> bool:
        return self.millis == _millis_of(other)

    def is_past(self) -> bool:
        return self.millis < clock.now_millis()

    def is_future(self) -> bool:
        return self.millis > clock.now_millis()

    def is_within(
        self, duration: DurationInput, anchor: "Instant | datetime | None" = None
    ) -> bool:
        """Check whether this instant lies within +/- duration of anchor.

        Args:
            duration: Window size, applied on both sides of the anchor. The
                sign of the duration is ignored.
            anchor: Reference point (defaults to now)

        Example:
            >>> # Rate limiting: at most one request per second
            >>> allowed = not last_request.is_within("1s")
        """
        window = abs(normalize_to_millis(duration))
        anchor_ms = clock.now_millis() if anchor is None else _millis_of(anchor)
        return abs(self.millis - anchor_ms) <= window

    # Expiration helpers

    def has_expired(self) -> bool:
        return self.is_past()

    def expires_within(self, duration: DurationInput) -> bool:
        """True if still in the future but due within `duration`.

        Useful for refreshing tokens or cache entries before they lapse.
        """
        now = clock.now_millis()
        if self.millis <= now:
            return False
        return self.millis - now <= normalize_to_millis(duration)

    def expired_within(self, duration: DurationInput) -> bool:
        """True if already past, but by no more than `duration` (grace periods)."""
        now = clock.now_millis()
        if self.millis >= now:
            return False
        return now - self.millis <= normalize_to_millis(duration)

    # Output

    def to_seconds(self) -> Seconds:
        return Seconds(self.millis // SECOND)

    def to_millis(self) -> Milliseconds:
        return Milliseconds(self.millis)

    def to_datetime(self) -> datetime:
        """UTC-aware datetime for this instant."""
        return _EPOCH + timedelta(milliseconds=self.millis)

    def to_iso(self) -> str:
        """ISO-8601 in UTC with millisecond precision, e.g. 2024-01-01T00:00:00.000Z"""
        text = self.to_datetime().isoformat(timespec="milliseconds")
        return text.replace("+00:00", "Z")

    def to_relative(self, *, long: bool = False) -> str:
        """Text such as 'in 5m', '2 hours ago' or 'just now'."""
        return format_relative(self.millis - clock.now_millis(), long=long)

    @override
    def __str__(self) -> str:
        return self.to_iso()


def _datetime_millis(dt: datetime) -> int:
    if dt.tzinfo is None:
        raise TypeError(
            f"Instant requires a timezone-aware datetime.\n"
            f"Got naive datetime: {dt!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )
    return (dt - _EPOCH) // _ONE_MS


def _millis_of(other: Any) -> int:
    if isinstance(other, Instant):
        return other.millis
    if isinstance(other, datetime):
        return _datetime_millis(other)
    raise TypeError(
        f"Expected an Instant or timezone-aware datetime, "
        f"got {type(other).__name__!r}: {other!r}"
    )
