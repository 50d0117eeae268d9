"""
Category-level messaging for a target rule.

Messaging rules
---------------
    on target (|change| <= tolerance)  -> KEEP
    expense, target below current      -> REDUCE
    expense, target above current      -> MAINTAIN            (never "increase")
    savings, target above current      -> INCREASE
    savings, target below current      -> MAINTAIN_EXCELLENT  (never "reduce")

``current`` is rounded half-up to a whole percent before comparison, so a
household at 51.5% needs reads as 52%.

The tolerance band defaults to 2 percentage points.
"""

from __future__ import annotations

import math
import sys

from budget_coach.models.recommendation import (
    CategoryRecommendation,
    OverspendingRecommendation,
)
from budget_coach.models.rule import BudgetRule
from budget_coach.taxonomy.advice_taxonomy import (
    CategoryAction,
    CategoryType,
    OverspendingPriority,
)

DEFAULT_ON_TARGET_TOLERANCE = 2.0

_CATEGORY_TEMPLATES: dict[CategoryAction, str] = {
    CategoryAction.KEEP: "Keep {category} at {current}%, you're on target",
    CategoryAction.REDUCE: (
        "Reduce {category} from {current}% to {target}% ({change} points)"
    ),
    CategoryAction.MAINTAIN: (
        "Maintain {category} at {current}%, you're already below the {target}% target"
    ),
    CategoryAction.INCREASE: (
        "Increase {category} from {current}% to {target}% (+{change} points)"
    ),
    CategoryAction.MAINTAIN_EXCELLENT: (
        "Maintain {category} at {current}%, you're already above the {target}% target"
    ),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer; halves round up (2.5 -> 3, -2.5 -> -2).

    NaN reads as 0 and infinities clamp to ``sys.maxsize``, so a percentage
    computed against a vanishingly small income still renders.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return sys.maxsize if value > 0 else -sys.maxsize
    return math.floor(value + 0.5)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _choose_action(
    category_type: CategoryType,
    change_needed: float,
    is_on_target:  bool,
) -> CategoryAction:
    if is_on_target:
        return CategoryAction.KEEP
    if category_type == CategoryType.EXPENSE:
        return CategoryAction.REDUCE if change_needed < 0 else CategoryAction.MAINTAIN
    return CategoryAction.INCREASE if change_needed > 0 else CategoryAction.MAINTAIN_EXCELLENT


def generate_category_recommendations(
    target_rule: BudgetRule,
    needs_pct:   float,
    wants_pct:   float,
    savings_pct: float,
    tolerance:   float = DEFAULT_ON_TARGET_TOLERANCE,
) -> list[CategoryRecommendation]:
    """Build Needs, Wants and Savings instructions against ``target_rule``.

    Args:
        target_rule: Rule to compare against.
        needs_pct:   Current needs share of income, in percent.
        wants_pct:   Current wants share of income, in percent.
        savings_pct: Current savings share of income, in percent.
        tolerance:   Half-width of the "on target" band, in percentage points.

    Returns:
        Three CategoryRecommendation records in Needs, Wants, Savings order.
    """
    categories = [
        ("Needs",   needs_pct,   target_rule.needs,   CategoryType.EXPENSE),
        ("Wants",   wants_pct,   target_rule.wants,   CategoryType.EXPENSE),
        ("Savings", savings_pct, target_rule.savings, CategoryType.SAVINGS),
    ]

    results: list[CategoryRecommendation] = []
    for label, pct, target, category_type in categories:
        current       = round_half_up(pct)
        change_needed = target - current
        is_on_target  = abs(change_needed) <= tolerance
        action        = _choose_action(category_type, change_needed, is_on_target)

        message = _CATEGORY_TEMPLATES[action].format(
            category=label,
            current=current,
            target=_fmt(target),
            change=_fmt(change_needed),
        )
        results.append(
            CategoryRecommendation(
                label=label,
                category_type=category_type,
                action=action,
                message=message,
                current=current,
                target=target,
                change_needed=change_needed,
                is_on_target=is_on_target,
            )
        )
    return results


def generate_overspending_recommendations(
    wants_pct:       float,
    needs_pct:       float,
    best_match_rule: BudgetRule,
) -> list[OverspendingRecommendation]:
    """Fixed critical / important / aspirational actions for overspenders.

    All three are returned regardless of the current pattern; the caller's
    percentages are only quoted in the messages.
    """
    return [
        OverspendingRecommendation(
            label="Keep wants low",
            message=(
                f"Wants take {round_half_up(wants_pct)}% of income. Keep discretionary "
                "spending below 30% and cut it first to stop overspending."
            ),
            priority=OverspendingPriority.CRITICAL,
        ),
        OverspendingRecommendation(
            label="Address needs",
            message=(
                f"Needs take {round_half_up(needs_pct)}% of income. Look for cheaper "
                "essentials or ways to increase income."
            ),
            priority=OverspendingPriority.IMPORTANT,
        ),
        OverspendingRecommendation(
            label="Long-term goal",
            message=(
                f"Once expenses are below income, work towards the "
                f"{best_match_rule.name} rule."
            ),
            priority=OverspendingPriority.ASPIRATIONAL,
        ),
    ]
