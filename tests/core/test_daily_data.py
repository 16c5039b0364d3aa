# [TESTER] v1

from __future__ import annotations

import dataclasses
import random

import pytest

from stakemath.core.daily_data import HALF_MASK, DailyRecord, decode_day, decode_range, encode_day


def test_decode_day_splits_high_and_low_halves() -> None:
    rec = decode_day((1000 << 128) | 100)
    assert rec == DailyRecord(day_stake_shares_total=1000, day_payout_total=100)


def test_decode_day_handles_max_word_without_precision_loss() -> None:
    rec = decode_day((1 << 256) - 1)
    assert rec.day_stake_shares_total == HALF_MASK
    assert rec.day_payout_total == HALF_MASK


def test_encode_day_reconstructs_packed_word() -> None:
    rng = random.Random(0)
    words = [0, 1, HALF_MASK, HALF_MASK + 1, (1 << 256) - 1]
    words += [rng.randrange(0, 1 << 256) for _ in range(50)]
    for raw in words:
        assert encode_day(decode_day(raw)) == raw


def test_decode_day_rejects_out_of_range_and_non_int() -> None:
    with pytest.raises(ValueError, match="2\\^256"):
        decode_day(1 << 256)
    with pytest.raises(ValueError):
        decode_day(-1)
    with pytest.raises(TypeError):
        decode_day(True)
    with pytest.raises(TypeError):
        decode_day("0x01")


def test_decode_range_preserves_order() -> None:
    raws = [(3 << 128) | 30, (1 << 128) | 10, (2 << 128) | 20]
    out = decode_range(raws)
    assert [r.day_stake_shares_total for r in out] == [3, 1, 2]
    assert [r.day_payout_total for r in out] == [30, 10, 20]
    assert decode_range([]) == []


def test_daily_record_is_immutable_and_bounded() -> None:
    rec = DailyRecord(day_stake_shares_total=1, day_payout_total=2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.day_payout_total = 3  # type: ignore[misc]
    with pytest.raises(ValueError):
        DailyRecord(day_stake_shares_total=HALF_MASK + 1, day_payout_total=0)
