"""
Proportional daily reward accumulation.

Each settled day pays `payout_total * stake_shares // shares_total` to a stake.
Rounding is per day (floor), then summed; summing first and dividing once
would not match the protocol.
"""

from __future__ import annotations

from typing import Sequence

from .daily_data import DailyRecord
from .errors import InvalidRangeError, ZeroSharesTotalError


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_shares(stake_shares: int) -> None:
    _require_int("stake_shares", stake_shares)
    if stake_shares < 0:
        raise ValueError(f"stake_shares must be non-negative: {stake_shares}")


def accumulate(
    daily_data: Sequence[DailyRecord],
    stake_shares: int,
    begin_day: int,
    end_day: int,
) -> int:
    """
    Sum the stake's share of each day's payout over `[begin_day, end_day)`.

    Args:
        daily_data: Decoded settled days; their share totals already include `stake_shares`
        stake_shares: Share weight of the stake
        begin_day: First day (inclusive)
        end_day: Last day (exclusive)

    Returns:
        Total payout in hearts

    Raises:
        InvalidRangeError: If the range is inverted or exceeds `daily_data`
        ZeroSharesTotalError: If a day in range has a zero shares total
    """
    _require_shares(stake_shares)
    _require_int("begin_day", begin_day)
    _require_int("end_day", end_day)
    if begin_day < 0 or begin_day > end_day or end_day > len(daily_data):
        raise InvalidRangeError(begin_day, end_day, len(daily_data))

    payout = 0
    for day in range(begin_day, end_day):
        rec = daily_data[day]
        if rec.day_stake_shares_total == 0:
            raise ZeroSharesTotalError(day)
        payout += (rec.day_payout_total * stake_shares) // rec.day_stake_shares_total
    return payout


def estimate_single_day(daily_data: Sequence[DailyRecord], stake_shares: int, day: int) -> int:
    """
    Estimate one day's payout for shares not yet counted in that day's total.

    Used for a live day: the stored shares total does not include the stake, so
    the stake's shares are added to the denominator:

        payout_total * stake_shares // (shares_total + stake_shares)
    """
    _require_shares(stake_shares)
    _require_int("day", day)
    if not (0 <= day < len(daily_data)):
        raise InvalidRangeError(day, day + 1, len(daily_data))

    rec = daily_data[day]
    denom = rec.day_stake_shares_total + stake_shares
    if denom == 0:
        raise ZeroSharesTotalError(day)
    return (rec.day_payout_total * stake_shares) // denom
