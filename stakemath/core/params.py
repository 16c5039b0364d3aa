"""
Protocol parameters for penalty calculations.

Defaults are the on-chain constants. Simulators can override them from a YAML
file (`load_params`) or from the environment (`params_from_env`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml


LATE_PENALTY_GRACE_DAYS = 14
LATE_PENALTY_SCALE_DAYS = 700
EARLY_PENALTY_MIN_DAYS = 90

ENV_PREFIX = "STAKEMATH_"


@dataclass(frozen=True)
class StakeParams:
    late_penalty_grace_days: int = LATE_PENALTY_GRACE_DAYS
    late_penalty_scale_days: int = LATE_PENALTY_SCALE_DAYS
    early_penalty_min_days: int = EARLY_PENALTY_MIN_DAYS

    def __post_init__(self) -> None:
        for name, v in (
            ("late_penalty_grace_days", self.late_penalty_grace_days),
            ("late_penalty_scale_days", self.late_penalty_scale_days),
            ("early_penalty_min_days", self.early_penalty_min_days),
        ):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0:
                raise ValueError(f"{name} must be non-negative: {v}")
        if self.late_penalty_scale_days == 0:
            raise ValueError("late_penalty_scale_days must be positive")


DEFAULT_PARAMS = StakeParams()


def params_from_mapping(obj: Mapping[str, Any]) -> StakeParams:
    """Build `StakeParams` from a mapping, rejecting unknown keys."""
    if not isinstance(obj, Mapping):
        raise TypeError("params must be a mapping")
    known = {f.name for f in fields(StakeParams)}
    unknown = sorted(set(obj) - known)
    if unknown:
        raise ValueError(f"unknown stake params: {', '.join(map(str, unknown))}")
    return StakeParams(**dict(obj))


def load_params(path: Path | str) -> StakeParams:
    """Load `StakeParams` from a YAML mapping; an empty file yields the defaults."""
    obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if obj is None:
        return DEFAULT_PARAMS
    if not isinstance(obj, Mapping):
        raise TypeError("params YAML must be a mapping")
    return params_from_mapping(obj)


def _env_int(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def params_from_env(environ: Mapping[str, str] | None = None) -> StakeParams:
    """
    Read overrides from `STAKEMATH_*` variables.

    Missing or blank variables keep the protocol default.
    """
    env = os.environ if environ is None else environ
    values = {}
    for f in fields(StakeParams):
        v = _env_int(env, ENV_PREFIX + f.name.upper())
        if v is not None:
            values[f.name] = v
    return StakeParams(**values)
