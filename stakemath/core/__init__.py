"""
Core stake reward and penalty algorithms
"""

from .daily_data import DailyRecord, decode_day, decode_range, encode_day
from .errors import InvalidRangeError, StakeMathError, ZeroSharesTotalError
from .params import DEFAULT_PARAMS, StakeParams, load_params, params_from_env
from .penalties import early_penalty_and_payout, early_penalty_days, late_penalty
from .rewards import accumulate, estimate_single_day
from .stake_return import StakeReturnResult, calc_stake_return, compute_stake_return

__all__ = [
    "DailyRecord",
    "decode_day",
    "decode_range",
    "encode_day",
    "InvalidRangeError",
    "StakeMathError",
    "ZeroSharesTotalError",
    "DEFAULT_PARAMS",
    "StakeParams",
    "load_params",
    "params_from_env",
    "early_penalty_and_payout",
    "early_penalty_days",
    "late_penalty",
    "accumulate",
    "estimate_single_day",
    "StakeReturnResult",
    "calc_stake_return",
    "compute_stake_return",
]
