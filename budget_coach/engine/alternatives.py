"""
Alternative-strategy generators.

Alternatives are ordered easiest-first: discretionary cuts before essential
cuts, and income growth is always on the list.
"""

from __future__ import annotations

from budget_coach.models.rule import BudgetRule
from budget_coach.taxonomy.advice_taxonomy import Alternative

# Thresholds above which a cut is worth suggesting while overspending.
OVERSPENDING_WANTS_THRESHOLD = 20.0
OVERSPENDING_NEEDS_THRESHOLD = 50.0


def generate_overspending_alternatives(
    needs_pct: float,
    wants_pct: float,
) -> list[Alternative]:
    """Ways out of overspending: reduce wants, reduce needs, earn more."""
    alternatives: list[Alternative] = []
    if wants_pct > OVERSPENDING_WANTS_THRESHOLD:
        alternatives.append(Alternative.REDUCE_WANTS)
    if needs_pct > OVERSPENDING_NEEDS_THRESHOLD:
        alternatives.append(Alternative.REDUCE_NEEDS)
    alternatives.append(Alternative.INCREASE_INCOME)
    return alternatives


def generate_needs_reduction_alternatives(
    needs_pct:   float,
    wants_pct:   float,
    target_rule: BudgetRule,
) -> list[Alternative]:
    """Softer paths for when ``target_rule`` would require cutting essentials.

    ``needs_pct`` is accepted for symmetry with the overspending generator;
    the suggestions only depend on whether wants still exceed the target.
    """
    alternatives: list[Alternative] = []
    if wants_pct > target_rule.wants:
        alternatives.append(Alternative.REDUCE_WANTS_MORE)
    alternatives.append(Alternative.INCREASE_INCOME)
    alternatives.append(Alternative.GRADUAL_APPROACH)
    return alternatives
