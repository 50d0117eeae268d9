"""
Budget snapshot and expense item models.

``BudgetSnapshot`` is the explicit value object passed into the engine: the
four totals (income, needs, wants, savings) plus the savings split and the
expense ceiling ratio.  It is rebuilt by the caller on every input change
and never mutated.

Derived percentages follow one convention everywhere in the package: when
income is zero every percentage is zero (see ``percent_of``).

Validation
----------
Amounts must be finite and non-negative.  The raw engine functions do not
validate their inputs; this model is the boundary where callers are expected
to reject negative, NaN or infinite input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from budget_coach.taxonomy.advice_taxonomy import BudgetStatus


def percent_of(amount: float, income: float) -> float:
    """Return ``amount`` as a percentage of ``income``; 0.0 when income is 0."""
    if income == 0:
        return 0.0
    return amount / income * 100.0


class ExpenseItem(BaseModel):
    """One named line in the detailed needs or wants list."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = ""
    amount: float = 0.0

    @field_validator("amount")
    @classmethod
    def validate_amount_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"amount must be non-negative, got {v}.")
        return v


class BudgetSnapshot(BaseModel):
    """Monthly income and category totals for one household.

    Attributes:
        income:                Monthly income.
        total_needs:           Sum of essential expenses.
        total_wants:           Sum of discretionary expenses.
        total_savings:         Amount set aside (emergency fund + other).
        emergency_fund_amount: Portion of savings going to the emergency fund.
        other_savings_amount:  Portion of savings going elsewhere.
        max_expense_ratio:     Expenses above ``income * ratio`` are "too high".
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    income: float
    total_needs: float = 0.0
    total_wants: float = 0.0
    total_savings: float = 0.0
    emergency_fund_amount: float = 0.0
    other_savings_amount: float = 0.0
    max_expense_ratio: float = 1.5

    @field_validator(
        "income",
        "total_needs",
        "total_wants",
        "total_savings",
        "emergency_fund_amount",
        "other_savings_amount",
    )
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Budget amounts must be non-negative, got {v}.")
        return v

    @field_validator("max_expense_ratio")
    @classmethod
    def validate_ratio(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"max_expense_ratio must be positive, got {v}.")
        return v

    # ── Derived values ────────────────────────────────────────────────────────

    @property
    def needs_pct(self) -> float:
        return percent_of(self.total_needs, self.income)

    @property
    def wants_pct(self) -> float:
        return percent_of(self.total_wants, self.income)

    @property
    def savings_pct(self) -> float:
        return percent_of(self.total_savings, self.income)

    @property
    def total_expenses(self) -> float:
        return self.total_needs + self.total_wants

    @property
    def remaining_after_expenses(self) -> float:
        """Income left once needs and wants are paid; never negative."""
        return max(0.0, self.income - self.total_expenses)

    @property
    def max_allowed_expenses(self) -> float:
        return self.income * self.max_expense_ratio

    @property
    def has_overspending(self) -> bool:
        return self.total_expenses > self.income

    @property
    def is_expenses_too_high(self) -> bool:
        return self.total_expenses > self.max_allowed_expenses

    @property
    def is_expenses_same_or_exceed_income(self) -> bool:
        return self.total_expenses >= self.income

    @property
    def status(self) -> BudgetStatus:
        """Traffic-light status: too high beats at-limit beats healthy."""
        if self.is_expenses_too_high:
            return BudgetStatus.OVERSPENDING
        if self.is_expenses_same_or_exceed_income:
            return BudgetStatus.AT_LIMIT
        return BudgetStatus.HEALTHY
