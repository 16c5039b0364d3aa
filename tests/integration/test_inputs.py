# [TESTER] v1

from __future__ import annotations

import pytest

from stakemath.core.daily_data import DailyRecord
from stakemath.integration.inputs import parse_daily_data, parse_stake_record, parse_uint
from stakemath.state.stake import StakeRecord


def test_parse_uint_accepts_int_decimal_and_hex() -> None:
    assert parse_uint(42, name="x") == 42
    assert parse_uint("42", name="x") == 42
    assert parse_uint("0x2a", name="x") == 42
    assert parse_uint("0X2A", name="x") == 42


@pytest.mark.parametrize("bad", [" 42", "4_2", "0x", "0x2g", "-1", "", "1e3"])
def test_parse_uint_rejects_malformed_strings(bad: str) -> None:
    with pytest.raises(ValueError):
        parse_uint(bad, name="x")


@pytest.mark.parametrize("bad", [True, 1.0, None, [1]])
def test_parse_uint_rejects_non_numeric_types(bad: object) -> None:
    with pytest.raises(TypeError):
        parse_uint(bad, name="x")


def test_parse_uint_rejects_negative_int() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        parse_uint(-5, name="x")


def test_parse_daily_data_decodes_hex_words() -> None:
    word = (1000 << 128) | 100
    out = parse_daily_data([hex(word), str(word), word])
    assert out == [DailyRecord(day_stake_shares_total=1000, day_payout_total=100)] * 3


def test_parse_daily_data_rejects_words_wider_than_256_bits() -> None:
    with pytest.raises(ValueError):
        parse_daily_data([hex(1 << 256)])


def test_parse_stake_record_accepts_contract_field_names() -> None:
    stake = parse_stake_record(
        {"pooledDay": "3", "stakedDays": 365, "unpooledDay": "0x190", "stakeShares": "500", "stakedHearts": 10}
    )
    assert stake == StakeRecord(pooled_day=3, staked_days=365, unpooled_day=400, stake_shares=500, staked_hearts=10)


def test_parse_stake_record_accepts_snake_case() -> None:
    stake = parse_stake_record(
        {"pooled_day": 0, "staked_days": 1, "unpooled_day": 10, "stake_shares": 500, "staked_hearts": 0}
    )
    assert stake.unpooled_day == 10


def test_parse_stake_record_rejects_missing_and_duplicate_fields() -> None:
    with pytest.raises(ValueError, match="missing field: stakedHearts"):
        parse_stake_record({"pooledDay": 0, "stakedDays": 1, "unpooledDay": 1, "stakeShares": 1})
    with pytest.raises(ValueError, match="given twice"):
        parse_stake_record(
            {
                "pooledDay": 0,
                "pooled_day": 0,
                "stakedDays": 1,
                "unpooledDay": 1,
                "stakeShares": 1,
                "stakedHearts": 1,
            }
        )
