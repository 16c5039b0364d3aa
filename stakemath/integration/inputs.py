"""
Parsing of externally supplied stake inputs.

Packed day words usually arrive as JSON-RPC hex quantities ("0x...") or as
decimal strings from log replays; stake entries arrive with the contract's
camelCase field names. Everything here is strict: malformed input is rejected,
never coerced.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping

from ..core.daily_data import DailyRecord, decode_range
from ..state.stake import StakeRecord


_HEX_CHARS_RE = re.compile(r"^[0-9a-fA-F]+$")
_DEC_CHARS_RE = re.compile(r"^[0-9]+$")

_STAKE_FIELDS = (
    ("pooled_day", "pooledDay"),
    ("staked_days", "stakedDays"),
    ("unpooled_day", "unpooledDay"),
    ("stake_shares", "stakeShares"),
    ("staked_hearts", "stakedHearts"),
)


def parse_uint(value: Any, *, name: str) -> int:
    """Parse an unsigned integer given as int, decimal string or 0x-prefixed hex."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int or numeric string")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"{name} must be non-negative: {value}")
        return value
    if not isinstance(value, str):
        raise TypeError(f"{name} must be an int or numeric string")

    # int() tolerates whitespace and underscores; reject them explicitly.
    if value[:2].lower() == "0x":
        body = value[2:]
        if not _HEX_CHARS_RE.fullmatch(body):
            raise ValueError(f"{name} must be valid hex")
        return int(body, 16)
    if not _DEC_CHARS_RE.fullmatch(value):
        raise ValueError(f"{name} must be a decimal or 0x-prefixed hex string")
    return int(value, 10)


def parse_raw_day(value: Any) -> int:
    return parse_uint(value, name="raw day value")


def parse_daily_data(values: Iterable[Any]) -> List[DailyRecord]:
    """Parse and decode a sequence of packed day words."""
    return decode_range(parse_raw_day(v) for v in values)


def parse_stake_record(obj: Mapping[str, Any]) -> StakeRecord:
    """
    Build a `StakeRecord` from a mapping.

    Accepts snake_case keys or the contract's camelCase keys (not both for the
    same field).
    """
    if not isinstance(obj, Mapping):
        raise TypeError("stake must be a mapping")
    values = {}
    for snake, camel in _STAKE_FIELDS:
        if snake in obj and camel in obj:
            raise ValueError(f"stake field given twice: {snake} / {camel}")
        if snake in obj:
            raw = obj[snake]
        elif camel in obj:
            raw = obj[camel]
        else:
            raise ValueError(f"stake is missing field: {camel}")
        values[snake] = parse_uint(raw, name=snake)
    return StakeRecord(**values)
