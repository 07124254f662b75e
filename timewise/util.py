"""Unit constants and lookup tables for timewise.

Time unit constants represent durations in milliseconds.
Months and years are approximations (365.25-day year, month = year / 12),
not calendar-aware lengths.
"""

from dataclasses import dataclass
from types import MappingProxyType

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
YEAR = DAY * 365.25
MONTH = YEAR / 12

# Below this distance format_relative() prints "in a moment" / "just now"
RELATIVE_THRESHOLD_MS = SECOND * 10

# Accepted spellings for duration strings, keyed lowercase
UNITS: MappingProxyType[str, float] = MappingProxyType(
    {
        "milliseconds": MILLISECOND,
        "millisecond": MILLISECOND,
        "msecs": MILLISECOND,
        "msec": MILLISECOND,
        "ms": MILLISECOND,
        "seconds": SECOND,
        "second": SECOND,
        "secs": SECOND,
        "sec": SECOND,
        "s": SECOND,
        "minutes": MINUTE,
        "minute": MINUTE,
        "mins": MINUTE,
        "min": MINUTE,
        "m": MINUTE,
        "hours": HOUR,
        "hour": HOUR,
        "hrs": HOUR,
        "hr": HOUR,
        "h": HOUR,
        "days": DAY,
        "day": DAY,
        "d": DAY,
        "weeks": WEEK,
        "week": WEEK,
        "w": WEEK,
        "months": MONTH,
        "month": MONTH,
        "mo": MONTH,
        "years": YEAR,
        "year": YEAR,
        "yrs": YEAR,
        "yr": YEAR,
        "y": YEAR,
    }
)


@dataclass(frozen=True, kw_only=True)
class DisplayUnit:
    millis: float
    short: str
    singular: str
    plural: str

    def name(self, value: float) -> str:
        return self.singular if value == 1 else self.plural


# Largest first; humanize() picks the first unit that fits
DISPLAY_UNITS: tuple[DisplayUnit, ...] = (
    DisplayUnit(millis=YEAR, short="y", singular="year", plural="years"),
    DisplayUnit(millis=MONTH, short="mo", singular="month", plural="months"),
    DisplayUnit(millis=WEEK, short="w", singular="week", plural="weeks"),
    DisplayUnit(millis=DAY, short="d", singular="day", plural="days"),
    DisplayUnit(millis=HOUR, short="h", singular="hour", plural="hours"),
    DisplayUnit(millis=MINUTE, short="m", singular="minute", plural="minutes"),
    DisplayUnit(millis=SECOND, short="s", singular="second", plural="seconds"),
    DisplayUnit(
        millis=MILLISECOND, short="ms", singular="millisecond", plural="milliseconds"
    ),
)
