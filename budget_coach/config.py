"""
Application configuration management.

Sources, lowest precedence first:
  1. ``config/default.toml``   shipped defaults (tolerance, split, currency)
  2. ``config/local.toml``     per-machine tweaks, e.g. another currency
  3. ``.env``                  seeds ``BUDGET_COACH_*`` variables
  4. ``BUDGET_COACH_*``        log level, currency symbol, debug flag

Entry point: ``load_config(config_path=None) -> AppConfig``

Only the CLI reads configuration.  Engine functions take plain arguments
(tolerance, ratios, split percentages) so they stay pure.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class EngineConfig(BaseModel):
    """Numeric policy knobs passed into the engine by the CLI."""

    model_config = ConfigDict(frozen=True)

    on_target_tolerance_pct: float = 2.0
    max_expense_ratio: float = 1.5

    @field_validator("on_target_tolerance_pct")
    @classmethod
    def validate_tolerance(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"on_target_tolerance_pct must be >= 0, got {v}.")
        return v

    @field_validator("max_expense_ratio")
    @classmethod
    def validate_ratio(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"max_expense_ratio must be positive, got {v}.")
        return v


class SavingsConfig(BaseModel):
    """Default split of savings between emergency fund and other savings."""

    model_config = ConfigDict(frozen=True)

    emergency_fund_pct: float = 50.0
    other_savings_pct: float = 50.0

    @field_validator("emergency_fund_pct", "other_savings_pct")
    @classmethod
    def validate_pct(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"Savings split percentages must be in [0, 100], got {v}.")
        return v


class DisplayConfig(BaseModel):
    """Terminal output settings."""

    model_config = ConfigDict(frozen=True)

    currency_symbol: str = "RM"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    engine: EngineConfig = EngineConfig()
    savings: SavingsConfig = SavingsConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Nearest ancestor of this package holding pyproject.toml."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Build the budget-coach ``AppConfig`` from TOML, .env and environment.

    Args:
        config_path: TOML file to start from (the CLI ``--config`` option).
            A ``local.toml`` beside it is merged on top.  When omitted,
            ``config/default.toml`` under the project root is used.

    Returns:
        Validated ``AppConfig``.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # A missing .env is fine; real environment variables are never overwritten.
    load_dotenv(dotenv_path=root / ".env", override=False)

    toml_path = Path(config_path) if config_path is not None else root / "config" / "default.toml"
    if not toml_path.exists():
        raise FileNotFoundError(
            f"Budget Coach config not found: {toml_path}\n"
            "Pass --config with a TOML file, or restore config/default.toml."
        )

    raw = _read_toml(toml_path)
    local_path = toml_path.with_name("local.toml")
    if local_path.exists():
        raw = _deep_merge(raw, _read_toml(local_path))

    return _build_app_config(_apply_env_overrides(raw))


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge nested tables; scalar keys in ``override`` win."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply BUDGET_COACH_* env vars to the raw config dict.

    Supported overrides:
      BUDGET_COACH_LOG_LEVEL        → raw["logging"]["level"]
      BUDGET_COACH_CURRENCY_SYMBOL  → raw["display"]["currency_symbol"]
      BUDGET_COACH_DEBUG            → raw["debug"]
    """
    if log_level := os.environ.get("BUDGET_COACH_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if symbol := os.environ.get("BUDGET_COACH_CURRENCY_SYMBOL"):
        raw.setdefault("display", {})["currency_symbol"] = symbol

    if debug := os.environ.get("BUDGET_COACH_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Validate each TOML table into its section model."""
    return AppConfig(
        engine=EngineConfig(**raw.get("engine", {})),
        savings=SavingsConfig(**raw.get("savings", {})),
        display=DisplayConfig(**raw.get("display", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", False),
    )
