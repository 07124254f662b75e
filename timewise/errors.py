"""Exceptions raised by timewise.

Parse failures all derive from InvalidDurationError, a ValueError, so callers
that only care about "bad input" can catch ValueError.
"""


class InvalidDurationError(ValueError):
    """A duration string could not be parsed."""

    def __init__(self, message: str, *, input: str):
        super().__init__(message)
        self.input: str = input


class EmptyInputError(InvalidDurationError):
    """The duration string is empty or whitespace-only."""


class UnknownUnitError(InvalidDurationError):
    """A component names a unit that is not in the unit table."""

    def __init__(self, message: str, *, unit: str, input: str):
        super().__init__(message, input=input)
        self.unit: str = unit


class MalformedInputError(InvalidDurationError):
    """Unexpected characters, or nothing that looks like a duration."""

    def __init__(self, message: str, *, fragment: str, input: str):
        super().__init__(message, input=input)
        self.fragment: str = fragment


class InvalidTimestampError(ValueError):
    """An ISO-8601 timestamp string could not be parsed."""

    def __init__(self, message: str, *, input: str):
        super().__init__(message)
        self.input: str = input
