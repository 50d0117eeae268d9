"""
Advice taxonomy for budget recommendations.

Every recommendation the engine produces is described by a small set of
closed vocabularies:
  - ``MessageType``          — the *situation*: which branch of the decision
                               procedure classified the household?
  - ``Alternative``          — the *levers*: alternative strategies offered
                               alongside (or instead of) a target rule.
  - ``CategoryType``         — whether a category is an expense or savings.
  - ``CategoryAction``       — the per-category instruction.
  - ``OverspendingPriority`` — urgency of an overspending recommendation.
  - ``BudgetStatus``         — traffic-light status of expenses vs income.

Values are lowercase slugs so they serialise unchanged into JSON and can be
used as translation keys by any presentation layer.

Usage example::

    from budget_coach.taxonomy.advice_taxonomy import MessageType

    if rec.message_type == MessageType.OVERSPENDING:
        ...

This module has NO imports from any other ``budget_coach`` package.
"""

from enum import StrEnum


class MessageType(StrEnum):
    """Situation classified by the recommendation engine (priority order)."""

    OVERSPENDING = "overspending"
    """Expenses exceed income; no target rule, only an aspirational match."""

    GOLD_OPTIONAL_WANTS = "gold_optional_wants"
    """Savings >= 20% but wants above 30%; trimming wants is optional."""

    GOLD_OPTIONAL_NEEDS = "gold_optional_needs"
    """Savings >= 20% but needs above 50%; growing income is optional."""

    GOLD_ACHIEVED = "gold_achieved"
    """Savings >= 20% with needs and wants inside the 50:30:20 limits."""

    PROGRESS = "progress"
    """Saving at least 1% but below 20%; move to the next achievable rule."""

    START_SAVING = "start_saving"
    """Saving less than 1% of income."""


class Alternative(StrEnum):
    """Alternative strategy tags attached to a recommendation."""

    REDUCE_WANTS = "reduce_wants"
    REDUCE_NEEDS = "reduce_needs"
    INCREASE_INCOME = "increase_income"
    REDUCE_WANTS_MORE = "reduce_wants_more"
    """Cut discretionary spending further instead of essentials."""

    GRADUAL_APPROACH = "gradual_approach"
    """Reach the target over several months rather than at once."""


class CategoryType(StrEnum):
    """Kind of budget category; decides which directions are actionable."""

    EXPENSE = "expense"
    SAVINGS = "savings"


class CategoryAction(StrEnum):
    """Per-category instruction.

    Expense categories only ever receive KEEP, REDUCE or MAINTAIN.
    Savings only ever receives KEEP, INCREASE or MAINTAIN_EXCELLENT.
    """

    KEEP = "keep"
    REDUCE = "reduce"
    MAINTAIN = "maintain"
    INCREASE = "increase"
    MAINTAIN_EXCELLENT = "maintain_excellent"


class OverspendingPriority(StrEnum):
    """Urgency of an overspending recommendation."""

    CRITICAL = "critical"
    IMPORTANT = "important"
    ASPIRATIONAL = "aspirational"


class BudgetStatus(StrEnum):
    """Traffic-light status of total expenses against income."""

    HEALTHY = "healthy"
    """Expenses below income."""

    AT_LIMIT = "at_limit"
    """Expenses equal or exceed income."""

    OVERSPENDING = "overspending"
    """Expenses above the allowed ceiling (income * max expense ratio)."""


EXPENSE_ACTIONS: frozenset[CategoryAction] = frozenset(
    {CategoryAction.KEEP, CategoryAction.REDUCE, CategoryAction.MAINTAIN}
)
SAVINGS_ACTIONS: frozenset[CategoryAction] = frozenset(
    {CategoryAction.KEEP, CategoryAction.INCREASE, CategoryAction.MAINTAIN_EXCELLENT}
)
