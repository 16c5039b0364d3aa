"""
Stake return calculation.

Combines reward accumulation with the early/late penalty kernels into the
amount a stake pays back when it ends:

- early exit (`served_days < staked_days`): principal plus the served payout.
  The early penalty is reported but not subtracted here.
- full term or later: principal plus payout, minus the late penalty, capped
  at zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..state.stake import StakeRecord
from .daily_data import DailyRecord
from .params import DEFAULT_PARAMS, StakeParams
from .penalties import early_penalty_and_payout, late_penalty
from .rewards import accumulate

logger = logging.getLogger("stakemath.core.stake_return")


@dataclass(frozen=True)
class StakeReturnResult:
    payout: int
    penalty: int
    capped_penalty: int
    stake_return: int
    early_exit: bool

    def __post_init__(self) -> None:
        for name, v in (
            ("payout", self.payout),
            ("penalty", self.penalty),
            ("capped_penalty", self.capped_penalty),
            ("stake_return", self.stake_return),
        ):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0:
                raise ValueError(f"{name} must be non-negative: {v}")


def compute_stake_return(
    daily_data: Sequence[DailyRecord],
    stake: StakeRecord,
    served_days: int,
    *,
    params: StakeParams = DEFAULT_PARAMS,
) -> StakeReturnResult:
    """
    Compute the stake return together with its payout/penalty breakdown.

    Args:
        daily_data: Decoded daily totals covering the served window
        stake: The stake position
        served_days: Days the stake actually stayed pooled

    Returns:
        StakeReturnResult with the final non-negative `stake_return`

    Raises:
        InvalidRangeError: If the served window reaches outside `daily_data`
        ZeroSharesTotalError: If a referenced day has a zero shares total
    """
    if not isinstance(served_days, int) or isinstance(served_days, bool):
        raise TypeError("served_days must be an int")
    if served_days < 0:
        raise ValueError(f"served_days must be non-negative: {served_days}")

    if served_days < stake.staked_days:
        payout, penalty = early_penalty_and_payout(
            daily_data,
            stake.pooled_day,
            stake.staked_days,
            served_days,
            stake.stake_shares,
            params=params,
        )
        logger.debug(
            "early exit: served=%d staked=%d payout=%d penalty=%d",
            served_days,
            stake.staked_days,
            payout,
            penalty,
        )
        return StakeReturnResult(
            payout=payout,
            penalty=penalty,
            capped_penalty=0,
            stake_return=stake.staked_hearts + payout,
            early_exit=True,
        )

    payout = accumulate(daily_data, stake.stake_shares, stake.pooled_day, stake.pooled_day + served_days)
    stake_return = stake.staked_hearts + payout
    penalty = late_penalty(
        stake.staked_days,
        stake.unpooled_day - stake.pooled_day,
        stake_return,
        params=params,
    )

    capped_penalty = 0
    if penalty > stake_return:
        # Cannot return less than nothing.
        logger.debug("late penalty %d exceeds return %d; capping to zero", penalty, stake_return)
        capped_penalty = stake_return
    elif penalty:
        capped_penalty = penalty

    return StakeReturnResult(
        payout=payout,
        penalty=penalty,
        capped_penalty=capped_penalty,
        stake_return=stake_return - capped_penalty,
        early_exit=False,
    )


def calc_stake_return(
    daily_data: Sequence[DailyRecord],
    stake: StakeRecord,
    served_days: int,
    *,
    params: StakeParams = DEFAULT_PARAMS,
) -> int:
    """Final stake return in hearts (never negative)."""
    return compute_stake_return(daily_data, stake, served_days, params=params).stake_return
