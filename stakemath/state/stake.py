"""
Stake positions as supplied by the caller.

Mirrors the protocol's stake entry: the day the stake joined the pool, its
committed length, the day it left, its share weight and its principal.
"""

from __future__ import annotations

from dataclasses import dataclass


Hearts = int  # Non-negative integer (arbitrary precision)
Day = int  # Protocol day index


@dataclass(frozen=True)
class StakeRecord:
    pooled_day: Day
    staked_days: int
    unpooled_day: Day
    stake_shares: int
    staked_hearts: Hearts

    def __post_init__(self) -> None:
        for name, v in (
            ("pooled_day", self.pooled_day),
            ("staked_days", self.staked_days),
            ("unpooled_day", self.unpooled_day),
            ("stake_shares", self.stake_shares),
            ("staked_hearts", self.staked_hearts),
        ):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0:
                raise ValueError(f"{name} must be non-negative: {v}")

    @property
    def locked_day(self) -> Day:
        """Day the committed term ends."""
        return self.pooled_day + self.staked_days
