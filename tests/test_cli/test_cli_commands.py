"""Tests for the budget-coach Typer CLI."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from budget_coach.cli import app

runner = CliRunner()


def _invoke(config_file: Path, *args: str):
    return runner.invoke(app, [*args, "--config", str(config_file)])


def test_rules_lists_catalog(config_file: Path) -> None:
    result = _invoke(config_file, "rules")
    assert result.exit_code == 0
    for name in ("50:30:20", "70:20:10", "80:20:0"):
        assert name in result.stdout


def test_match_tie_goes_to_first_rule(config_file: Path) -> None:
    result = _invoke(
        config_file, "match",
        "--income", "5000", "--needs", "3000", "--wants", "1000", "--savings", "1000",
    )
    assert result.exit_code == 0
    assert "Rule:           50:30:20" in result.stdout


def test_recommend_json_gold(config_file: Path) -> None:
    result = _invoke(
        config_file, "recommend",
        "--income", "5000", "--needs", "2000", "--wants", "1500", "--savings", "1500",
        "--json",
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["recommendation"]["message_type"] == "gold_achieved"
    assert payload["recommendation"]["is_gold_standard"] is True
    assert len(payload["categories"]) == 3
    assert payload["overspending_plan"] == []


def test_recommend_json_overspending(config_file: Path) -> None:
    result = _invoke(
        config_file, "recommend",
        "--income", "4000", "--needs", "3000", "--wants", "1500",
        "--json",
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    rec = payload["recommendation"]
    assert rec["message_type"] == "overspending"
    assert rec["has_overspending"] is True
    assert rec["next_rule"] is None
    assert payload["categories"] == []
    assert [p["priority"] for p in payload["overspending_plan"]] == [
        "critical", "important", "aspirational",
    ]


def test_recommend_text_report(config_file: Path) -> None:
    result = _invoke(
        config_file, "recommend",
        "--income", "4000", "--needs", "3000", "--wants", "1000",
    )
    assert result.exit_code == 0
    assert "=== Budget Summary" in result.stdout
    assert "Next rule:      70:20:10" in result.stdout


def test_recommend_rejects_negative_income(config_file: Path) -> None:
    result = _invoke(config_file, "recommend", "--income=-100")
    assert result.exit_code == 1


def test_recommend_rejects_nan_income(config_file: Path) -> None:
    result = _invoke(config_file, "recommend", "--income", "nan", "--needs", "100")
    assert result.exit_code == 1


def test_recommend_rejects_out_of_range_savings_split(config_file: Path) -> None:
    result = _invoke(
        config_file, "recommend",
        "--income", "5000", "--needs", "2000", "--wants", "1500", "--savings", "1500",
        "--emergency-pct", "150",
    )
    assert result.exit_code == 1
    assert "Emergency fund" not in result.stdout


def test_missing_config_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["rules", "--config", str(tmp_path / "missing.toml")])
    assert result.exit_code == 1


def test_validate_config(config_file: Path) -> None:
    result = _invoke(config_file, "validate-config", "--full")
    assert result.exit_code == 0
    assert "[OK] Config valid." in result.stdout
    assert '"currency_symbol": "RM"' in result.stdout
