"""
Achievable-rule selector: picks the most realistic rule to pursue next.

Candidates are the catalog rules that save strictly more than the household
does today (or every rule when ``allow_lower_savings`` is set, used for
aspirational references while overspending).  The candidate with the lowest
change effort wins; the earliest candidate wins ties.  When nothing saves
more than the household already does, the gold-standard rule is returned.
"""

from __future__ import annotations

import logging
from typing import Sequence

from budget_coach.engine.catalog import BUDGET_RULES, gold_standard_rule
from budget_coach.engine.effort import calculate_change_effort
from budget_coach.models.rule import BudgetRule

logger = logging.getLogger(__name__)


def find_most_achievable_rule(
    needs_pct:           float,
    wants_pct:           float,
    savings_pct:         float,
    allow_lower_savings: bool = False,
    rules:               Sequence[BudgetRule] = BUDGET_RULES,
) -> BudgetRule:
    """Return the lowest-effort rule that improves savings.

    Args:
        needs_pct:           Current needs share of income, in percent.
        wants_pct:           Current wants share of income, in percent.
        savings_pct:         Current savings share of income, in percent.
        allow_lower_savings: Consider every rule, not only those saving more.
        rules:               Rules to scan, in tie-break order.

    Returns:
        The chosen BudgetRule.
    """
    if allow_lower_savings:
        candidates = list(rules)
    else:
        candidates = [rule for rule in rules if rule.savings > savings_pct]

    if not candidates:
        logger.debug(
            "No rule saves more than %.1f%%; defaulting to gold standard", savings_pct
        )
        return gold_standard_rule()

    best_rule      = candidates[0]
    lowest_effort  = float("inf")
    for rule in candidates:
        effort = calculate_change_effort(needs_pct, wants_pct, savings_pct, rule)
        if effort < lowest_effort:
            lowest_effort = effort
            best_rule     = rule

    logger.debug("Most achievable rule %s (effort %.2f)", best_rule.name, lowest_effort)
    return best_rule
