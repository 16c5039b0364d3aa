"""
Daily aggregate decoding.

The protocol stores one packed 256-bit word per day:

    raw = (day_stake_shares_total << 128) | day_payout_total

Both halves are unsigned 128-bit values. Python ints are arbitrary precision,
so totals near 2^128 - 1 survive decoding and later products unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


HALF_BITS = 128
HALF_MASK = (1 << HALF_BITS) - 1
WORD_LIMIT = 1 << (2 * HALF_BITS)


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class DailyRecord:
    """Decoded totals for one protocol day."""

    day_stake_shares_total: int
    day_payout_total: int

    def __post_init__(self) -> None:
        for name, v in (
            ("day_stake_shares_total", self.day_stake_shares_total),
            ("day_payout_total", self.day_payout_total),
        ):
            _require_int(name, v)
            if not (0 <= v <= HALF_MASK):
                raise ValueError(f"{name} must be in [0, 2^128): {v}")


def decode_day(raw: int) -> DailyRecord:
    """Split a packed day word into (shares total, payout total)."""
    _require_int("raw", raw)
    if not (0 <= raw < WORD_LIMIT):
        raise ValueError(f"raw day value must be in [0, 2^256): {raw}")
    return DailyRecord(
        day_stake_shares_total=raw >> HALF_BITS,
        day_payout_total=raw & HALF_MASK,
    )


def decode_range(raws: Iterable[int]) -> List[DailyRecord]:
    return [decode_day(raw) for raw in raws]


def encode_day(record: DailyRecord) -> int:
    """Pack a `DailyRecord` back into its 256-bit word (inverse of `decode_day`)."""
    return (record.day_stake_shares_total << HALF_BITS) | record.day_payout_total
