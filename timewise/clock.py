"""Wall clock used by Instant for anything relative to "now".

The clock is injectable so tests (and simulations) can pin the current time:

    from timewise import clock

    clock.set_clock(lambda: 1718452800000)  # 2024-06-15T12:00:00Z
    ...
    clock.reset_clock()
"""

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


def _system_clock() -> int:
    """Return the current Unix time in whole milliseconds."""
    return time.time_ns() // 1_000_000


_clock: Callable[[], int] = _system_clock


def now_millis() -> int:
    """Read the clock once. Every call is a fresh reading."""
    return _clock()


def set_clock(clock: Callable[[], int]) -> None:
    """Replace the clock.

    Args:
        clock: Function returning the current Unix time in milliseconds
    """
    global _clock
    logger.debug("Clock overridden with %r", clock)
    _clock = clock


def reset_clock() -> None:
    """Restore the system clock."""
    global _clock
    logger.debug("Clock reset to system time")
    _clock = _system_clock
