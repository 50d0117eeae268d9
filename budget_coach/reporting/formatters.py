"""
ASCII terminal formatters for CLI commands.

All formatters accept engine records and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Currency
--------
Amounts are shown with a configurable symbol, thousands separators and two
decimals, e.g. ``RM 1,234.56``.  Negative amounts put the sign before the
symbol: ``-RM 50.00``.
"""

from __future__ import annotations

from typing import Sequence

from budget_coach.models.recommendation import (
    CategoryRecommendation,
    MatchResult,
    OverspendingRecommendation,
    Recommendation,
)
from budget_coach.models.rule import BudgetRule
from budget_coach.models.snapshot import BudgetSnapshot
from budget_coach.taxonomy.advice_taxonomy import Alternative, BudgetStatus, MessageType

_HEADLINES: dict[MessageType, str] = {
    MessageType.OVERSPENDING: (
        "You are spending more than you earn. Get expenses below income first."
    ),
    MessageType.GOLD_OPTIONAL_WANTS: (
        "Gold standard reached! Trimming wants below 30% is optional."
    ),
    MessageType.GOLD_OPTIONAL_NEEDS: (
        "Gold standard reached! Growing income would ease high essential costs."
    ),
    MessageType.GOLD_ACHIEVED: "Gold standard achieved. Keep it up!",
    MessageType.PROGRESS: "You are saving. Here is the next step up.",
    MessageType.START_SAVING: "Time to start saving. Here is an achievable first target.",
}

_ALTERNATIVE_TEXT: dict[Alternative, str] = {
    Alternative.REDUCE_WANTS: "Reduce discretionary spending (wants)",
    Alternative.REDUCE_NEEDS: "Reduce essential costs (needs)",
    Alternative.INCREASE_INCOME: "Increase income",
    Alternative.REDUCE_WANTS_MORE: "Cut wants further instead of essentials",
    Alternative.GRADUAL_APPROACH: "Move towards the target gradually over several months",
}

_STATUS_TAGS: dict[BudgetStatus, str] = {
    BudgetStatus.HEALTHY: "[HEALTHY]",
    BudgetStatus.AT_LIMIT: "[AT LIMIT]",
    BudgetStatus.OVERSPENDING: "[TOO HIGH]",
}


# ── Currency ──────────────────────────────────────────────────────────────────


def format_currency(amount: float, symbol: str = "RM") -> str:
    """Format ``amount`` as ``"<symbol> 1,234.56"``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {abs(amount):,.2f}"


# ── Rules ─────────────────────────────────────────────────────────────────────


def format_rule_table(rules: Sequence[BudgetRule]) -> str:
    """Format the rule catalog as an ASCII table in catalog order."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Budget Rules ===")
    header = f"    {'Rule':<10}  {'Needs':>6}  {'Wants':>6}  {'Savings':>7}"
    lines.append(header)
    lines.append("    " + "-" * (len(header) - 4))
    for rule in rules:
        lines.append(
            f"    {rule.name:<10}  {rule.needs:>5.0f}%  {rule.wants:>5.0f}%  "
            f"{rule.savings:>6.0f}%"
        )
    return "\n".join(lines)


# ── Snapshot ──────────────────────────────────────────────────────────────────


def format_snapshot_summary(snapshot: BudgetSnapshot, symbol: str = "RM") -> str:
    """Income, expenses and savings with the traffic-light status tag."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Budget Summary {_STATUS_TAGS[snapshot.status]} ===")
    lines.append(f"  Monthly income:  {format_currency(snapshot.income, symbol)}")
    lines.append(
        f"  Needs:           {format_currency(snapshot.total_needs, symbol)}"
        f"  ({snapshot.needs_pct:.1f}%)"
    )
    lines.append(
        f"  Wants:           {format_currency(snapshot.total_wants, symbol)}"
        f"  ({snapshot.wants_pct:.1f}%)"
    )
    lines.append(
        f"  Savings:         {format_currency(snapshot.total_savings, symbol)}"
        f"  ({snapshot.savings_pct:.1f}%)"
    )
    lines.append(f"  Total expenses:  {format_currency(snapshot.total_expenses, symbol)}")
    if snapshot.total_savings > 0:
        lines.append(
            f"    Emergency fund: {format_currency(snapshot.emergency_fund_amount, symbol)}"
        )
        lines.append(
            f"    Other savings:  {format_currency(snapshot.other_savings_amount, symbol)}"
        )
    return "\n".join(lines)


# ── Match ─────────────────────────────────────────────────────────────────────


def format_match_result(match: MatchResult) -> str:
    """One-block description of the closest rule."""
    rule = match.rule
    return "\n".join(
        [
            "",
            "=== Closest Budget Rule ===",
            f"  Rule:           {rule.name}",
            f"  Targets:        needs {rule.needs:.0f}% / wants {rule.wants:.0f}% / "
            f"savings {rule.savings:.0f}%",
            f"  Distance score: {match.score:.1f}  (0 = exact match)",
        ]
    )


# ── Recommendation ────────────────────────────────────────────────────────────


def format_recommendation(
    rec:                 Recommendation,
    category_recs:       Sequence[CategoryRecommendation] = (),
    overspending_recs:   Sequence[OverspendingRecommendation] = (),
) -> str:
    """Headline, target, alternatives and per-category messages."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Recommendation ===")
    lines.append(f"  {_HEADLINES[rec.message_type]}")

    if rec.next_rule is not None:
        lines.append(f"  Next rule:      {rec.next_rule.name}")
    if rec.best_match_rule is not None:
        lines.append(f"  Long-term goal: {rec.best_match_rule.name}")
    if rec.effort_score is not None:
        lines.append(f"  Effort score:   {rec.effort_score:.1f}  (lower = easier)")

    if rec.alternatives:
        lines.append("")
        lines.append("  Alternatives:")
        for alt in rec.alternatives:
            lines.append(f"    - {_ALTERNATIVE_TEXT[alt]}")

    if overspending_recs:
        lines.append("")
        lines.append("  Action plan:")
        for orec in overspending_recs:
            lines.append(f"    [{orec.priority.value.upper()}] {orec.label}: {orec.message}")

    if category_recs:
        lines.append("")
        lines.append("  By category:")
        for crec in category_recs:
            marker = "=" if crec.is_on_target else "*"
            lines.append(f"    {marker} {crec.message}")

    return "\n".join(lines)
