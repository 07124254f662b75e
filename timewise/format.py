"""Human-readable formatting for durations and relative times."""

import math

from timewise.util import DISPLAY_UNITS, RELATIVE_THRESHOLD_MS


def _round_half_up(value: float) -> float:
    # round() rounds ties to even; 1.5h must display as 2h
    return math.floor(value + 0.5) if math.isfinite(value) else value


def humanize(ms: float, *, long: bool = False) -> str:
    """Format a duration in milliseconds using its largest fitting unit.

    The magnitude is rounded to the nearest whole unit, so 90 minutes reads
    as "2h". Zero is never signed.

    Example:
        >>> humanize(300000)
        '5m'
        >>> humanize(5400000, long=True)
        '2 hours'
        >>> humanize(-1000, long=True)
        '-1 second'
    """
    magnitude = abs(ms)
    sign = "-" if ms < 0 else ""

    if magnitude == 0:
        return "0 milliseconds" if long else "0ms"

    for unit in DISPLAY_UNITS:
        if magnitude >= unit.millis:
            value = _round_half_up(magnitude / unit.millis)
            if long:
                return f"{sign}{value} {unit.name(value)}"
            return f"{sign}{value}{unit.short}"

    # Sub-millisecond (or NaN) magnitudes are shown as-is
    return f"{sign}{magnitude} milliseconds" if long else f"{sign}{magnitude}ms"


def format_relative(diff_ms: float, *, long: bool = False) -> str:
    """Format a signed offset from a reference point.

    Positive offsets are in the future ("in 5m"), negative ones in the past
    ("5m ago"). Offsets under ten seconds collapse to "in a moment" or
    "just now".
    """
    distance = abs(diff_ms)

    if distance < RELATIVE_THRESHOLD_MS:
        return "in a moment" if diff_ms >= 0 else "just now"

    text = humanize(distance, long=long)
    if diff_ms > 0:
        return f"in {text}"
    return f"{text} ago"
