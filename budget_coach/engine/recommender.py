"""
Recommendation engine: classifies a household's budget and produces the
next coaching step.

Decision procedure (evaluated in order — first match wins)
----------------------------------------------------------
    1. OVERSPENDING : total_expenses > income
                      No target rule.  The pattern is normalised to sum to
                      100 and matched against the catalog purely as an
                      aspirational reference (``best_match_rule``).
    2. GOLD         : savings_pct >= 20
                      a. wants_pct > 30  -> gold_optional_wants
                      b. needs_pct > 50  -> gold_optional_needs
                      c. otherwise       -> gold_achieved
                      The target is always the 50:30:20 rule.
    3. PROGRESSIVE  : everything else
                      Target = most achievable rule that saves more.
                      If it asks for a needs cut, softer alternatives are
                      attached.  savings_pct < 1 -> start_saving, else progress.

Advice never regresses: the engine never proposes raising an expense
category or lowering savings.
"""

from __future__ import annotations

import logging

from budget_coach.engine.alternatives import (
    generate_needs_reduction_alternatives,
    generate_overspending_alternatives,
)
from budget_coach.engine.catalog import gold_standard_rule
from budget_coach.engine.effort import calculate_change_effort
from budget_coach.engine.matcher import find_best_rule
from budget_coach.engine.selector import find_most_achievable_rule
from budget_coach.models.recommendation import Recommendation
from budget_coach.models.snapshot import BudgetSnapshot
from budget_coach.taxonomy.advice_taxonomy import MessageType

logger = logging.getLogger(__name__)

GOLD_SAVINGS_PCT      = 20.0
GOLD_WANTS_LIMIT_PCT  = 30.0
GOLD_NEEDS_LIMIT_PCT  = 50.0
START_SAVING_PCT      = 1.0


def get_next_recommendation(
    needs_pct:      float,
    wants_pct:      float,
    savings_pct:    float,
    total_expenses: float,
    income:         float,
) -> Recommendation:
    """Classify the budget and return the next recommended step.

    Args:
        needs_pct:      Needs share of income, in percent (0 when income is 0).
        wants_pct:      Wants share of income, in percent.
        savings_pct:    Savings share of income, in percent.
        total_expenses: Needs plus wants, in currency.
        income:         Monthly income, in currency.

    Returns:
        A fresh Recommendation.  Never raises for numeric input.
    """
    # ── 1. Overspending ───────────────────────────────────────────────────────
    if total_expenses > income:
        total_pct = needs_pct + wants_pct + savings_pct
        if total_pct > 0:
            norm_needs   = needs_pct / total_pct * 100.0
            norm_wants   = wants_pct / total_pct * 100.0
            norm_savings = savings_pct / total_pct * 100.0
        else:
            norm_needs = norm_wants = norm_savings = 0.0

        # Income of 100 makes the normalised shares read back as percentages.
        best_match = find_best_rule(100.0, norm_needs, norm_wants, norm_savings)
        logger.debug(
            "Overspending: expenses %.2f > income %.2f; aspirational rule %s",
            total_expenses, income, best_match.rule.name,
        )
        return Recommendation(
            next_rule=None,
            message_type=MessageType.OVERSPENDING,
            is_gold_standard=False,
            has_overspending=True,
            best_match_rule=best_match.rule,
            alternatives=generate_overspending_alternatives(needs_pct, wants_pct),
        )

    # ── 2. Gold standard or better ────────────────────────────────────────────
    if savings_pct >= GOLD_SAVINGS_PCT:
        if wants_pct > GOLD_WANTS_LIMIT_PCT:
            message_type = MessageType.GOLD_OPTIONAL_WANTS
        elif needs_pct > GOLD_NEEDS_LIMIT_PCT:
            message_type = MessageType.GOLD_OPTIONAL_NEEDS
        else:
            message_type = MessageType.GOLD_ACHIEVED
        logger.debug("Gold standard reached (%.1f%% saved): %s", savings_pct, message_type)
        return Recommendation(
            next_rule=gold_standard_rule(),
            message_type=message_type,
            is_gold_standard=True,
            has_overspending=False,
        )

    # ── 3. Progressive improvement ────────────────────────────────────────────
    target_rule  = find_most_achievable_rule(
        needs_pct, wants_pct, savings_pct, allow_lower_savings=False
    )
    effort_score = calculate_change_effort(needs_pct, wants_pct, savings_pct, target_rule)

    if target_rule.needs < needs_pct:
        alternatives = generate_needs_reduction_alternatives(
            needs_pct, wants_pct, target_rule
        )
    else:
        alternatives = []

    message_type = (
        MessageType.START_SAVING if savings_pct < START_SAVING_PCT else MessageType.PROGRESS
    )
    logger.debug(
        "Progressive target %s (effort %.2f, %d alternative(s))",
        target_rule.name, effort_score, len(alternatives),
    )
    return Recommendation(
        next_rule=target_rule,
        message_type=message_type,
        is_gold_standard=False,
        has_overspending=False,
        effort_score=effort_score,
        alternatives=alternatives,
    )


def recommend_for_snapshot(snapshot: BudgetSnapshot) -> Recommendation:
    """Run ``get_next_recommendation`` on the derived values of ``snapshot``."""
    return get_next_recommendation(
        needs_pct=snapshot.needs_pct,
        wants_pct=snapshot.wants_pct,
        savings_pct=snapshot.savings_pct,
        total_expenses=snapshot.total_expenses,
        income=snapshot.income,
    )
