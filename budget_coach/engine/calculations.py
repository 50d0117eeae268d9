"""
Snapshot calculations: raw calculator input -> ``BudgetSnapshot``.

Two input flows are supported:

  simple   : the household enters needs, wants and savings totals directly.
             The emergency-fund / other-savings split is a percentage of the
             entered savings.
  detailed : needs and wants are itemised.  Savings are whatever is left
             after expenses (never negative), split into emergency fund and
             other savings by percentage.  If the two percentages sum below
             100 the unallocated remainder is not counted as savings.

``expense_breakdown()`` lists the non-zero items of a category with their
share of that category, for charts and tables.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

from budget_coach.models.snapshot import BudgetSnapshot, ExpenseItem

DEFAULT_EMERGENCY_FUND_PCT = 50.0
DEFAULT_OTHER_SAVINGS_PCT  = 50.0
DEFAULT_MAX_EXPENSE_RATIO  = 1.5


def _validate_split(emergency_fund_pct: float, other_savings_pct: float) -> None:
    for pct in (emergency_fund_pct, other_savings_pct):
        if not 0.0 <= pct <= 100.0:
            raise ValueError(f"Savings split percentages must be in [0, 100], got {pct}.")


class ExpenseShare(NamedTuple):
    """A non-zero expense item and its share of the category total (percent)."""

    item:      ExpenseItem
    share_pct: float


def sum_items(items: Iterable[ExpenseItem]) -> float:
    return sum(item.amount for item in items)


def build_simple_snapshot(
    income:            float,
    total_needs:       float,
    total_wants:       float,
    total_savings:     float,
    emergency_fund_pct: float = DEFAULT_EMERGENCY_FUND_PCT,
    other_savings_pct:  float = DEFAULT_OTHER_SAVINGS_PCT,
    max_expense_ratio:  float = DEFAULT_MAX_EXPENSE_RATIO,
) -> BudgetSnapshot:
    """Build a snapshot from directly entered totals.

    Raises:
        ValueError: If a savings split percentage is outside [0, 100].
        pydantic.ValidationError: If any amount is negative or not finite.
    """
    _validate_split(emergency_fund_pct, other_savings_pct)
    return BudgetSnapshot(
        income=income,
        total_needs=total_needs,
        total_wants=total_wants,
        total_savings=total_savings,
        emergency_fund_amount=total_savings * emergency_fund_pct / 100.0,
        other_savings_amount=total_savings * other_savings_pct / 100.0,
        max_expense_ratio=max_expense_ratio,
    )


def build_detailed_snapshot(
    income:             float,
    needs_items:        Iterable[ExpenseItem],
    wants_items:        Iterable[ExpenseItem],
    emergency_fund_pct: float = DEFAULT_EMERGENCY_FUND_PCT,
    other_savings_pct:  float = DEFAULT_OTHER_SAVINGS_PCT,
    max_expense_ratio:  float = DEFAULT_MAX_EXPENSE_RATIO,
) -> BudgetSnapshot:
    """Build a snapshot from itemised needs and wants.

    Args:
        income:             Monthly income.
        needs_items:        Essential expense lines.
        wants_items:        Discretionary expense lines.
        emergency_fund_pct: Share of the remainder going to the emergency fund.
        other_savings_pct:  Share of the remainder going to other savings.
        max_expense_ratio:  Expense ceiling as a multiple of income.

    Returns:
        BudgetSnapshot whose savings are derived from the remainder.

    Raises:
        ValueError: If a savings split percentage is outside [0, 100].
        pydantic.ValidationError: If income is negative or not finite.
    """
    _validate_split(emergency_fund_pct, other_savings_pct)
    total_needs = sum_items(needs_items)
    total_wants = sum_items(wants_items)
    remaining   = max(0.0, income - (total_needs + total_wants))

    emergency = remaining * emergency_fund_pct / 100.0
    other     = remaining * other_savings_pct / 100.0

    return BudgetSnapshot(
        income=income,
        total_needs=total_needs,
        total_wants=total_wants,
        total_savings=emergency + other,
        emergency_fund_amount=emergency,
        other_savings_amount=other,
        max_expense_ratio=max_expense_ratio,
    )


def expense_breakdown(items: Iterable[ExpenseItem]) -> list[ExpenseShare]:
    """Return items with ``amount > 0`` and their share of the category.

    An empty list means "no items", not an error.
    """
    non_zero = [item for item in items if item.amount > 0]
    total = sum_items(non_zero)
    return [
        ExpenseShare(item=item, share_pct=(item.amount / total * 100.0) if total > 0 else 0.0)
        for item in non_zero
    ]
