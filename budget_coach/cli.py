"""
Budget Coach — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs (build a ``BudgetSnapshot``).
  4. Run the engine.
  5. Report result to stdout.

Install and run::

    pip install -e .
    budget-coach --help
    budget-coach rules
    budget-coach match --income 5000 --needs 3000 --wants 1000 --savings 1000
    budget-coach recommend --income 5000 --needs 2000 --wants 1500 --savings 1500
    budget-coach recommend --income 4000 --needs 3000 --wants 1500 --json
    budget-coach validate-config --full
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="budget-coach",
    help="Budget rule matching and savings coaching for household budgets.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from budget_coach.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from budget_coach.utils.logging import configure_logging
    configure_logging(config.logging)


def _build_snapshot_or_exit(config, income, needs, wants, savings, emergency_pct, other_pct):
    """Validate the entered totals into a BudgetSnapshot or exit with code 1.

    ``pydantic.ValidationError`` subclasses ``ValueError``, so one handler
    covers bad amounts and bad savings splits.
    """
    from budget_coach.engine.calculations import build_simple_snapshot

    try:
        return build_simple_snapshot(
            income=income,
            total_needs=needs,
            total_wants=wants,
            total_savings=savings,
            emergency_fund_pct=(
                emergency_pct if emergency_pct is not None
                else config.savings.emergency_fund_pct
            ),
            other_savings_pct=(
                other_pct if other_pct is not None
                else config.savings.other_savings_pct
            ),
            max_expense_ratio=config.engine.max_expense_ratio,
        )
    except ValueError as exc:
        typer.echo(f"[ERROR] Invalid budget input:\n{exc}", err=True)
        raise typer.Exit(code=1)


_CONFIG_OPTION_HELP = "Path to TOML config file (default: config/default.toml)."


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("rules")
def rules(
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
) -> None:
    """List the canonical budgeting rules in tie-break order."""
    from budget_coach.engine.catalog import BUDGET_RULES
    from budget_coach.reporting.formatters import format_rule_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    typer.echo(format_rule_table(BUDGET_RULES))


@app.command("match")
def match(
    income: float = typer.Option(..., "--income", help="Monthly income."),
    needs: float = typer.Option(0.0, "--needs", help="Total essential expenses."),
    wants: float = typer.Option(0.0, "--wants", help="Total discretionary expenses."),
    savings: float = typer.Option(0.0, "--savings", help="Total savings."),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
) -> None:
    """Find the budgeting rule closest to a spending pattern."""
    from budget_coach.engine.matcher import find_best_rule
    from budget_coach.reporting.formatters import format_match_result

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    snapshot = _build_snapshot_or_exit(config, income, needs, wants, savings, None, None)

    result = find_best_rule(
        snapshot.income, snapshot.total_needs, snapshot.total_wants, snapshot.total_savings
    )
    typer.echo(format_match_result(result))


@app.command("recommend")
def recommend(
    income: float = typer.Option(..., "--income", help="Monthly income."),
    needs: float = typer.Option(0.0, "--needs", help="Total essential expenses."),
    wants: float = typer.Option(0.0, "--wants", help="Total discretionary expenses."),
    savings: float = typer.Option(0.0, "--savings", help="Total savings."),
    emergency_pct: Optional[float] = typer.Option(
        None,
        "--emergency-pct",
        help="Share of savings for the emergency fund (default from config).",
    ),
    other_pct: Optional[float] = typer.Option(
        None,
        "--other-pct",
        help="Share of savings for other goals (default from config).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the recommendation as JSON instead of a text report.",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
) -> None:
    """Recommend the next budgeting step for a household.

    \b
    Overspending households get an action plan and a long-term rule.
    Everyone else gets a target rule with per-category instructions.
    """
    from budget_coach.engine.category import (
        generate_category_recommendations,
        generate_overspending_recommendations,
    )
    from budget_coach.engine.recommender import recommend_for_snapshot
    from budget_coach.reporting.formatters import (
        format_recommendation,
        format_snapshot_summary,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    snapshot = _build_snapshot_or_exit(
        config, income, needs, wants, savings, emergency_pct, other_pct
    )

    rec = recommend_for_snapshot(snapshot)

    category_recs = []
    overspending_recs = []
    if rec.next_rule is not None:
        category_recs = generate_category_recommendations(
            rec.next_rule,
            snapshot.needs_pct,
            snapshot.wants_pct,
            snapshot.savings_pct,
            tolerance=config.engine.on_target_tolerance_pct,
        )
    elif rec.best_match_rule is not None:
        overspending_recs = generate_overspending_recommendations(
            snapshot.wants_pct, snapshot.needs_pct, rec.best_match_rule
        )

    if as_json:
        payload = {
            "snapshot": {
                "income": snapshot.income,
                "needs_pct": snapshot.needs_pct,
                "wants_pct": snapshot.wants_pct,
                "savings_pct": snapshot.savings_pct,
                "total_expenses": snapshot.total_expenses,
                "status": snapshot.status.value,
            },
            "recommendation": rec.model_dump(mode="json"),
            "categories": [c.model_dump(mode="json") for c in category_recs],
            "overspending_plan": [o.model_dump(mode="json") for o in overspending_recs],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    symbol = config.display.currency_symbol
    typer.echo(format_snapshot_summary(snapshot, symbol))
    typer.echo(format_recommendation(rec, category_recs, overspending_recs))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  On-target tolerance: {config.engine.on_target_tolerance_pct}%")
    typer.echo(f"  Max expense ratio:   {config.engine.max_expense_ratio}x income")
    typer.echo(
        f"  Savings split:       {config.savings.emergency_fund_pct}% emergency / "
        f"{config.savings.other_savings_pct}% other"
    )
    typer.echo(f"  Currency symbol:     {config.display.currency_symbol}")
    typer.echo(f"  Log level:           {config.logging.level}")
    typer.echo(f"  Debug mode:          {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
