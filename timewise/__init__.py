import logging

from .duration import Duration, dur
from .errors import (
    EmptyInputError,
    InvalidDurationError,
    InvalidTimestampError,
    MalformedInputError,
    UnknownUnitError,
)
from .format import format_relative, humanize
from .instant import Instant
from .parse import normalize_to_millis, parse_duration
from .units import DurationInput, DurationLike, Milliseconds, Seconds

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Instant",
    "Duration",
    "dur",
    "Seconds",
    "Milliseconds",
    "DurationInput",
    "DurationLike",
    "parse_duration",
    "normalize_to_millis",
    "humanize",
    "format_relative",
    "InvalidDurationError",
    "EmptyInputError",
    "UnknownUnitError",
    "MalformedInputError",
    "InvalidTimestampError",
]
