"""
Engine output models.

``MatchResult`` is the answer of the rule matcher: the closest catalog rule
and its distance score (lower is closer).

``Recommendation`` is the coaching record produced by the recommendation
engine on every call.  Optional fields follow the branch that produced it:

  - overspending:   ``next_rule`` is ``None``; ``best_match_rule`` and
                    ``alternatives`` are set.
  - gold standard:  ``next_rule`` is the 50:30:20 rule; ``effort_score`` and
                    ``alternatives`` are ``None``.
  - progressive:    ``next_rule`` is the most achievable rule;
                    ``effort_score`` is set and ``alternatives`` is a list
                    (possibly empty).

``CategoryRecommendation`` and ``OverspendingRecommendation`` are the
per-category and overspending messages consumed by the presentation layer.

All models are frozen value objects with no identity beyond their fields.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from budget_coach.models.rule import BudgetRule
from budget_coach.taxonomy.advice_taxonomy import (
    Alternative,
    CategoryAction,
    CategoryType,
    MessageType,
    OverspendingPriority,
)


class MatchResult(BaseModel):
    """Closest catalog rule for a spending pattern.

    Attributes:
        rule:  The best-matching rule.
        score: Sum of absolute percentage differences; 0 is a perfect match.
    """

    model_config = ConfigDict(frozen=True)

    rule: BudgetRule
    score: float

    @field_validator("score")
    @classmethod
    def validate_score_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"score must be non-negative, got {v}.")
        return v


class Recommendation(BaseModel):
    """Structured coaching advice for one budget snapshot.

    Attributes:
        next_rule:        Rule to aim for next, or ``None`` when overspending.
        message_type:     Situation the household was classified into.
        is_gold_standard: True when savings are at least 20% of income.
        has_overspending: True when expenses exceed income.
        effort_score:     Weighted difficulty of reaching ``next_rule``.
        alternatives:     Alternative strategy tags, in suggestion order.
        best_match_rule:  Aspirational rule closest to the overspending pattern.
    """

    model_config = ConfigDict(frozen=True)

    next_rule: Optional[BudgetRule] = None
    message_type: MessageType
    is_gold_standard: bool = False
    has_overspending: bool = False
    effort_score: Optional[float] = None
    alternatives: Optional[list[Alternative]] = None
    best_match_rule: Optional[BudgetRule] = None


class CategoryRecommendation(BaseModel):
    """Instruction for one category (Needs, Wants or Savings).

    Attributes:
        label:         Category display label.
        category_type: Expense or savings.
        action:        What to do with the category.
        message:       English sentence describing the action.
        current:       Current share of income, rounded to a whole percent.
        target:        Target share of income from the rule.
        change_needed: ``target - current``.
        is_on_target:  True when ``|change_needed|`` is within the tolerance.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    category_type: CategoryType
    action: CategoryAction
    message: str
    current: int
    target: float
    change_needed: float
    is_on_target: bool


class OverspendingRecommendation(BaseModel):
    """One of the three fixed-order actions offered while overspending."""

    model_config = ConfigDict(frozen=True)

    label: str
    message: str
    priority: OverspendingPriority
