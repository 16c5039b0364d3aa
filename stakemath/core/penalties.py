"""
Early- and late-unstake penalty kernels (deterministic, integer-only).

Early exit: the protocol charges the rewards of a minimum-commitment window,
`penalty_days = max(ceil(staked_days / 2), EARLY_PENALTY_MIN_DAYS)`. Three
cases:

    served_days == 0             penalty estimated from the day before pooling
    penalty_days < served_days   penalty = rewards of the first penalty_days
    penalty_days >= served_days  penalty = served rewards scaled up to penalty_days

Intervals are end-exclusive:

    penalty:    [pooled_day  ...  penalty_end_day)
    delta:                       [penalty_end_day  ...  served_end_day)
    payout:     [pooled_day  ........................  served_end_day)

Late exit: after a grace window of `staked_days + LATE_PENALTY_GRACE_DAYS`, the
penalty grows linearly and reaches the full return after
`LATE_PENALTY_SCALE_DAYS` more days.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from .daily_data import DailyRecord
from .params import DEFAULT_PARAMS, StakeParams
from .rewards import accumulate, estimate_single_day

logger = logging.getLogger("stakemath.core.penalties")


def _require_non_negative_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")


def late_penalty(
    staked_days: int,
    unpooled_days: int,
    raw_stake_return: int,
    *,
    params: StakeParams = DEFAULT_PARAMS,
) -> int:
    """
    Penalty for ending a stake after its grace window.

    Args:
        staked_days: Committed stake length
        unpooled_days: Days between pooling and unpooling
        raw_stake_return: Principal plus payout before penalties

    Returns:
        `raw_stake_return * (unpooled_days - grace) // scale_days`, or 0 inside the grace window
    """
    _require_non_negative_int("staked_days", staked_days)
    if not isinstance(unpooled_days, int) or isinstance(unpooled_days, bool):
        raise TypeError("unpooled_days must be an int")
    _require_non_negative_int("raw_stake_return", raw_stake_return)

    effective_staked_days = staked_days + params.late_penalty_grace_days
    if unpooled_days <= effective_staked_days:
        return 0
    return (raw_stake_return * (unpooled_days - effective_staked_days)) // params.late_penalty_scale_days


def early_penalty_days(staked_days: int, *, params: StakeParams = DEFAULT_PARAMS) -> int:
    """Half of `staked_days` rounded up, floored at the protocol minimum."""
    _require_non_negative_int("staked_days", staked_days)
    penalty_days = staked_days // 2 + staked_days % 2
    return max(penalty_days, params.early_penalty_min_days)


def early_penalty_and_payout(
    daily_data: Sequence[DailyRecord],
    pooled_day: int,
    staked_days: int,
    served_days: int,
    stake_shares: int,
    *,
    params: StakeParams = DEFAULT_PARAMS,
) -> Tuple[int, int]:
    """
    Compute the served payout and the early-unstake penalty.

    Returns:
        Tuple of (payout, penalty)

    Raises:
        InvalidRangeError: If the served window reaches outside `daily_data`
        ZeroSharesTotalError: If a referenced day has a zero shares total
    """
    _require_non_negative_int("pooled_day", pooled_day)
    _require_non_negative_int("served_days", served_days)

    penalty_days = early_penalty_days(staked_days, params=params)
    served_end_day = pooled_day + served_days

    if served_days == 0:
        # No day before the pool start means nothing to sample.
        if pooled_day == 0:
            logger.debug("early exit on day 0 with no served days: no sample day")
            return 0, 0
        expected = estimate_single_day(daily_data, stake_shares, pooled_day - 1)
        return 0, expected * penalty_days

    if penalty_days < served_days:
        penalty_end_day = pooled_day + penalty_days
        penalty = accumulate(daily_data, stake_shares, pooled_day, penalty_end_day)
        delta = accumulate(daily_data, stake_shares, penalty_end_day, served_end_day)
        return penalty + delta, penalty

    payout = accumulate(daily_data, stake_shares, pooled_day, served_end_day)
    if penalty_days == served_days:
        return payout, payout
    # Short of the window: extend the served daily average over all penalty days.
    return payout, (payout * penalty_days) // served_days
