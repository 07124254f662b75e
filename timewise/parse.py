"""Duration string parsing.

Turns text like "1h30m", "2 days", "-5m" or "1500" into a signed number of
milliseconds. Bare numbers are milliseconds. Compound strings are summed
component by component; a leading sign applies to the whole expression.
"""

import logging
import re
from typing import Any, TypeGuard

from timewise.errors import (
    EmptyInputError,
    InvalidDurationError,
    MalformedInputError,
    UnknownUnitError,
)
from timewise.units import DurationInput, DurationLike
from timewise.util import MILLISECOND, UNITS

logger = logging.getLogger(__name__)

# Digits with at most one decimal point and nothing else: "100", "1.5", ".5"
_BARE_NUMBER = re.compile(r"\d+\.?\d*|\.\d+", re.ASCII)

# One component: number, optional whitespace, optional unit letters
_COMPONENT = re.compile(r"(\d+\.?\d*)\s*([a-zA-Z]*)", re.ASCII)


def _fail(error: InvalidDurationError) -> InvalidDurationError:
    logger.debug("Rejected duration %r: %s", error.input, error)
    return error


def parse_duration(input: str) -> float:
    """Parse a duration string into milliseconds.

    Args:
        input: Duration string like "1h", "30m", "1h30m", "2 days", "-5m"

    Returns:
        Signed duration in milliseconds

    Raises:
        TypeError: If input is not a string
        EmptyInputError: If input is empty or whitespace-only
        UnknownUnitError: If a component uses an unrecognized unit
        MalformedInputError: If input contains characters that are not part
            of a duration component

    Example:
        >>> parse_duration("1h30m")
        5400000.0
        >>> parse_duration("-2 days")
        -172800000.0
    """
    if not isinstance(input, str):
        raise TypeError(
            f"Invalid duration: expected string, got {type(input).__name__}"
        )

    text = input.strip()
    if not text:
        raise _fail(EmptyInputError("Invalid duration: empty string", input=input))

    negative = False
    if text[0] in "+-":
        negative = text[0] == "-"
        text = text[1:].strip()

    if _BARE_NUMBER.fullmatch(text):
        value = float(text)
        return -value if negative else value

    total = 0.0
    matched = False
    cursor = 0

    for match in _COMPONENT.finditer(text):
        gap = text[cursor : match.start()].strip()
        if gap:
            raise _fail(
                MalformedInputError(
                    f"Invalid duration: unexpected characters '{gap}' in '{input}'",
                    fragment=gap,
                    input=input,
                )
            )
        cursor = match.end()

        number, unit = match.groups()
        multiplier = UNITS.get(unit.lower()) if unit else MILLISECOND
        if multiplier is None:
            raise _fail(
                UnknownUnitError(
                    f"Invalid duration: unknown unit '{unit}' in '{input}'",
                    unit=unit,
                    input=input,
                )
            )

        total += float(number) * multiplier
        matched = True

    trailing = text[cursor:].strip()
    if trailing:
        raise _fail(
            MalformedInputError(
                f"Invalid duration: unexpected characters '{trailing}' in '{input}'",
                fragment=trailing,
                input=input,
            )
        )

    if not matched:
        raise _fail(
            MalformedInputError(
                f"Invalid duration: could not parse '{input}'",
                fragment=text,
                input=input,
            )
        )

    return -total if negative else total


def is_duration_like(value: Any) -> TypeGuard[DurationLike]:
    """True if value exposes a callable to_millis() (e.g. a Duration)."""
    return callable(getattr(value, "to_millis", None))


def _is_length(value: Any) -> bool:
    # Instant.to_millis() returns a Milliseconds timestamp, not a length
    if not is_duration_like(value):
        return False
    millis = value.to_millis()
    return isinstance(millis, (int, float)) and not isinstance(millis, bool)


def is_duration_input(value: Any) -> bool:
    """True for anything normalize_to_millis() accepts without a TypeError."""
    return isinstance(value, str) or _is_length(value)


def normalize_to_millis(value: DurationInput) -> float:
    """Resolve a duration string or Duration-like object to milliseconds.

    Bare numbers are rejected: a raw number does not say which unit it is in.
    """
    if isinstance(value, str):
        return parse_duration(value)
    if _is_length(value):
        return float(value.to_millis())
    raise TypeError(f"Invalid duration input: {type(value).__name__}")
