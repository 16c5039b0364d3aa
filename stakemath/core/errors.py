"""Exception types for the stake calculation core.

Malformed argument types raise `TypeError` and negative amounts raise
`ValueError` at the call site; the classes here cover failures that depend on
the supplied daily data.
"""

from __future__ import annotations


class StakeMathError(Exception):
    """Base class for stake calculation failures."""


class ZeroSharesTotalError(StakeMathError, ZeroDivisionError):
    """Raised when a day's share-total divisor is zero."""

    def __init__(self, day: int) -> None:
        self.day = day
        super().__init__(f"day {day}: stake shares total is zero")


class InvalidRangeError(StakeMathError, ValueError):
    """Raised when a day range is inverted or reaches outside the daily data."""

    def __init__(self, begin_day: int, end_day: int, length: int) -> None:
        self.begin_day = begin_day
        self.end_day = end_day
        self.length = length
        super().__init__(f"invalid day range [{begin_day}, {end_day}) for {length} days of data")
