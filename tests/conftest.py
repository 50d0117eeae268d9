"""
Shared pytest fixtures for the Budget Coach test suite.

Provides:
  - Sample ``BudgetSnapshot`` factories for the three headline scenarios
    (rule tie, overspending, gold standard).
  - ``config_file``: a minimal TOML config written to a temp directory, so
    config and CLI tests never depend on the repository's own config.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from budget_coach.models.snapshot import BudgetSnapshot


# ── Snapshot fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def tie_snapshot() -> BudgetSnapshot:
    """60/20/20 split: equidistant from 50:30:20 and 70:20:10."""
    return BudgetSnapshot(
        income=5000.0, total_needs=3000.0, total_wants=1000.0, total_savings=1000.0
    )


@pytest.fixture
def overspending_snapshot() -> BudgetSnapshot:
    """Expenses of 4500 against income of 4000."""
    return BudgetSnapshot(
        income=4000.0, total_needs=3000.0, total_wants=1500.0, total_savings=0.0
    )


@pytest.fixture
def gold_snapshot() -> BudgetSnapshot:
    """40/30/30 split: gold standard with nothing left to optimise."""
    return BudgetSnapshot(
        income=5000.0, total_needs=2000.0, total_wants=1500.0, total_savings=1500.0
    )


# ── Config fixture ────────────────────────────────────────────────────────────

@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a minimal config/default.toml and clear BUDGET_COACH_* env vars."""
    for var in ("BUDGET_COACH_LOG_LEVEL", "BUDGET_COACH_CURRENCY_SYMBOL", "BUDGET_COACH_DEBUG"):
        monkeypatch.delenv(var, raising=False)

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    path = config_dir / "default.toml"
    path.write_text(
        "debug = false\n"
        "\n"
        "[engine]\n"
        "on_target_tolerance_pct = 2.0\n"
        "max_expense_ratio = 1.5\n"
        "\n"
        "[savings]\n"
        "emergency_fund_pct = 60.0\n"
        "other_savings_pct = 40.0\n"
        "\n"
        "[display]\n"
        'currency_symbol = "RM"\n'
        "\n"
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n',
        encoding="utf-8",
    )
    return path
