"""
Change-effort estimator: how disruptive would reaching a target rule be?

Effort formula (weighted, one-directional)
------------------------------------------
    effort = (
        needs_cut       * 1.5   # essentials: rent, utilities, groceries
        + wants_cut     * 1.0   # discretionary: dining out, entertainment
        + savings_raise * 0.5   # redirecting money, no lifestyle change
    )

Only moves the engine would actually advise count: cutting needs, cutting
wants, raising savings.  A target that allows more spending or less saving
contributes nothing in that category, so the score is never negative.
"""

from __future__ import annotations

from budget_coach.models.rule import BudgetRule

NEEDS_REDUCTION_WEIGHT   = 1.5
WANTS_REDUCTION_WEIGHT   = 1.0
SAVINGS_INCREASE_WEIGHT  = 0.5


def calculate_change_effort(
    current_needs:   float,
    current_wants:   float,
    current_savings: float,
    target_rule:     BudgetRule,
) -> float:
    """Score the difficulty of moving from the current pattern to ``target_rule``.

    Args:
        current_needs:   Current needs share of income, in percent.
        current_wants:   Current wants share of income, in percent.
        current_savings: Current savings share of income, in percent.
        target_rule:     Rule being evaluated.

    Returns:
        Non-negative effort score; lower is more achievable.
    """
    needs_change   = target_rule.needs - current_needs
    wants_change   = target_rule.wants - current_wants
    savings_change = target_rule.savings - current_savings

    effort = 0.0
    if needs_change < 0:
        effort += abs(needs_change) * NEEDS_REDUCTION_WEIGHT
    if wants_change < 0:
        effort += abs(wants_change) * WANTS_REDUCTION_WEIGHT
    if savings_change > 0:
        effort += abs(savings_change) * SAVINGS_INCREASE_WEIGHT
    return effort
