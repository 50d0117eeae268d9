"""
Tests for budget_coach/config.py.

What we test
------------
load_config():
  - Reads an explicit TOML file.
  - Missing file raises FileNotFoundError.
  - local.toml next to the config file overrides values.
  - BUDGET_COACH_* environment variables override TOML values.
  - Invalid values raise ValidationError.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from budget_coach.config import AppConfig, LoggingConfig, _deep_merge, load_config


class TestLoadConfig:
    def test_reads_toml(self, config_file: Path):
        cfg = load_config(config_file)
        assert isinstance(cfg, AppConfig)
        assert cfg.engine.on_target_tolerance_pct == pytest.approx(2.0)
        assert cfg.savings.emergency_fund_pct == pytest.approx(60.0)
        assert cfg.logging.level == "WARNING"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_local_override(self, config_file: Path):
        (config_file.parent / "local.toml").write_text(
            '[display]\ncurrency_symbol = "$"\n', encoding="utf-8"
        )
        cfg = load_config(config_file)
        assert cfg.display.currency_symbol == "$"
        assert cfg.engine.max_expense_ratio == pytest.approx(1.5)

    def test_env_overrides(self, config_file: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BUDGET_COACH_LOG_LEVEL", "debug")
        monkeypatch.setenv("BUDGET_COACH_CURRENCY_SYMBOL", "SGD")
        monkeypatch.setenv("BUDGET_COACH_DEBUG", "yes")
        cfg = load_config(config_file)
        assert cfg.logging.level == "DEBUG"
        assert cfg.display.currency_symbol == "SGD"
        assert cfg.debug is True

    def test_invalid_split_raises(self, config_file: Path):
        config_file.write_text("[savings]\nemergency_fund_pct = 150.0\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="Savings split"):
            load_config(config_file)

    def test_negative_tolerance_raises(self, config_file: Path):
        config_file.write_text("[engine]\non_target_tolerance_pct = -1\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="on_target_tolerance_pct"):
            load_config(config_file)


class TestModels:
    def test_defaults(self):
        cfg = AppConfig()
        assert cfg.engine.on_target_tolerance_pct == 2.0
        assert cfg.display.currency_symbol == "RM"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Log level"):
            LoggingConfig(level="LOUD")


def test_deep_merge_nested():
    merged = _deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}
