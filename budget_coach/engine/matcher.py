"""
Rule matcher: finds the catalog rule closest to a spending pattern.

Distance score
--------------
    score = |needs% - rule.needs| + |wants% - rule.wants| + |savings% - rule.savings|

Every percentage point counts the same in every category; this is a
similarity measure, not a difficulty measure (see ``effort`` for that).

Example: 60% needs, 25% wants, 15% savings scores 20 against both 50:30:20
and 70:20:10 and 40 against 80:20:0.  The tie goes to 50:30:20 because it
comes first in the catalog.
"""

from __future__ import annotations

import logging
from typing import Sequence

from budget_coach.engine.catalog import BUDGET_RULES
from budget_coach.models.recommendation import MatchResult
from budget_coach.models.rule import BudgetRule
from budget_coach.models.snapshot import percent_of

logger = logging.getLogger(__name__)


def distance_score(
    needs_pct:   float,
    wants_pct:   float,
    savings_pct: float,
    rule:        BudgetRule,
) -> float:
    """Unweighted sum of absolute percentage differences to ``rule``."""
    return (
        abs(needs_pct - rule.needs)
        + abs(wants_pct - rule.wants)
        + abs(savings_pct - rule.savings)
    )


def find_best_rule(
    income:        float,
    total_needs:   float,
    total_wants:   float,
    total_savings: float,
    rules:         Sequence[BudgetRule] = BUDGET_RULES,
) -> MatchResult:
    """Match raw category totals to the closest rule.

    Zero income cannot produce meaningful percentages, so the first rule is
    returned with a score of 0 instead of raising.

    Args:
        income:        Monthly income.
        total_needs:   Sum of essential expenses.
        total_wants:   Sum of discretionary expenses.
        total_savings: Amount set aside.
        rules:         Rules to scan, in tie-break order.

    Returns:
        MatchResult for the lowest-scoring rule; the earliest rule wins ties.
    """
    if income == 0:
        return MatchResult(rule=rules[0], score=0.0)

    needs_pct   = percent_of(total_needs, income)
    wants_pct   = percent_of(total_wants, income)
    savings_pct = percent_of(total_savings, income)

    best_rule  = rules[0]
    best_score = float("inf")
    for rule in rules:
        score = distance_score(needs_pct, wants_pct, savings_pct, rule)
        # Strict '<' keeps the earlier rule on ties.
        if score < best_score:
            best_score = score
            best_rule  = rule

    logger.debug(
        "Best rule match %s (score %.2f) for %.1f/%.1f/%.1f",
        best_rule.name, best_score, needs_pct, wants_pct, savings_pct,
    )
    return MatchResult(rule=best_rule, score=best_score)
