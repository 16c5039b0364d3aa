# [TESTER] v1

from __future__ import annotations

from pathlib import Path

import pytest

from stakemath.core.params import DEFAULT_PARAMS, StakeParams, load_params, params_from_env


def test_defaults_match_protocol_constants() -> None:
    assert DEFAULT_PARAMS == StakeParams(
        late_penalty_grace_days=14,
        late_penalty_scale_days=700,
        early_penalty_min_days=90,
    )


def test_load_params_reads_yaml_overrides(tmp_path: Path) -> None:
    path = tmp_path / "params.yaml"
    path.write_text("late_penalty_grace_days: 7\nearly_penalty_min_days: 30\n", encoding="utf-8")
    params = load_params(path)
    assert params.late_penalty_grace_days == 7
    assert params.late_penalty_scale_days == 700
    assert params.early_penalty_min_days == 30


def test_load_params_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_params(path) == DEFAULT_PARAMS


def test_load_params_rejects_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("late_penalty_days: 3\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unknown stake params"):
        load_params(path)


def test_load_params_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_params(path)


def test_params_reject_zero_scale_and_bools() -> None:
    with pytest.raises(ValueError, match="positive"):
        StakeParams(late_penalty_scale_days=0)
    with pytest.raises(TypeError):
        StakeParams(early_penalty_min_days=True)
    with pytest.raises(ValueError):
        StakeParams(late_penalty_grace_days=-1)


def test_params_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STAKEMATH_LATE_PENALTY_SCALE_DAYS", " 350 ")
    monkeypatch.setenv("STAKEMATH_EARLY_PENALTY_MIN_DAYS", "")
    monkeypatch.delenv("STAKEMATH_LATE_PENALTY_GRACE_DAYS", raising=False)
    params = params_from_env()
    assert params.late_penalty_scale_days == 350
    assert params.early_penalty_min_days == 90
    assert params.late_penalty_grace_days == 14


def test_params_from_env_rejects_malformed_values() -> None:
    with pytest.raises(ValueError, match="STAKEMATH_LATE_PENALTY_GRACE_DAYS"):
        params_from_env({"STAKEMATH_LATE_PENALTY_GRACE_DAYS": "two weeks"})
