#!/usr/bin/env python3
"""
Compute one stake's return from a JSON case file.

Input shape:

    {
      "dailyData": ["0x...", "123...", ...],
      "stake": {"pooledDay": 0, "stakedDays": 1, "unpooledDay": 10, "stakeShares": 500, "stakedHearts": 0},
      "servedDays": 1
    }

Amounts in the output are decimal strings so JSON consumers keep full precision.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stakemath.core.errors import StakeMathError
from stakemath.core.params import DEFAULT_PARAMS, StakeParams, load_params, params_from_env
from stakemath.core.stake_return import StakeReturnResult, compute_stake_return
from stakemath.integration.inputs import parse_daily_data, parse_stake_record, parse_uint


def _load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def result_to_json_dict(result: StakeReturnResult) -> Dict[str, Any]:
    return {
        "payout": str(result.payout),
        "penalty": str(result.penalty),
        "cappedPenalty": str(result.capped_penalty),
        "stakeReturn": str(result.stake_return),
        "earlyExit": result.early_exit,
    }


def run_case(case: Any, *, params: StakeParams = DEFAULT_PARAMS) -> StakeReturnResult:
    if not isinstance(case, dict):
        raise ValueError("case must be a JSON object")
    for key in ("dailyData", "stake", "servedDays"):
        if key not in case:
            raise ValueError(f"case is missing key: {key}")
    if not isinstance(case["dailyData"], list):
        raise ValueError("dailyData must be a list")

    daily = parse_daily_data(case["dailyData"])
    stake = parse_stake_record(case["stake"])
    served_days = parse_uint(case["servedDays"], name="servedDays")
    return compute_stake_return(daily, stake, served_days, params=params)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compute one stake's return from a JSON case file.")
    p.add_argument("--input", required=True, help="Path to the JSON case file")
    p.add_argument("--params", default="", help="YAML file overriding protocol parameters")
    p.add_argument("--verbose", action="store_true", help="Log calculation branches to stderr")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"input not found: {input_path}")

    params = load_params(args.params) if args.params else params_from_env()

    try:
        result = run_case(_load_json(input_path), params=params)
    except (StakeMathError, ValueError, TypeError) as exc:
        print(f"[stake-return] FAIL: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result_to_json_dict(result), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
