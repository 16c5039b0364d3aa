"""
stakemath: off-chain stake reward and penalty recomputation.

Usage:
    from stakemath.core import decode_range, calc_stake_return
    from stakemath.state import StakeRecord

    daily = decode_range(packed_days)
    stake = StakeRecord(pooled_day=0, staked_days=1, unpooled_day=10, stake_shares=500, staked_hearts=0)
    calc_stake_return(daily, stake, served_days=1)
"""

__version__ = "0.1.0"
