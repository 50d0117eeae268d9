"""
Budget rule model.

A ``BudgetRule`` is a named target allocation of income across needs, wants
and savings, e.g. ``50:30:20``.  The canonical rules live in
``budget_coach.engine.catalog``; the model itself places no constraint on
the three percentages summing to 100 so that arbitrary patterns can be
compared against it.

Rules are frozen: they are defined once at import time and shared by every
engine call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class BudgetRule(BaseModel):
    """Named target allocation of income.

    Attributes:
        name:    Identifier such as ``"50:30:20"``.
        needs:   Target share of income for essentials, in percent.
        wants:   Target share of income for discretionary spending, in percent.
        savings: Target share of income set aside, in percent.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    needs: float
    wants: float
    savings: float

    @field_validator("needs", "wants", "savings")
    @classmethod
    def validate_percentage(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"Rule percentages must be in [0, 100], got {v}.")
        return v

    @field_validator("name")
    @classmethod
    def validate_name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Rule name must not be empty.")
        return v.strip()
