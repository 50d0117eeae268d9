"""
Tests for budget_coach/engine/effort.py.

What we test
------------
calculate_change_effort():
  - Needs cuts weigh 1.5, wants cuts 1.0, savings increases 0.5.
  - Changes in the other direction contribute nothing.
  - A savings-only change costs less than one needing a needs cut.
"""

from __future__ import annotations

import pytest

from budget_coach.engine.catalog import get_rule
from budget_coach.engine.effort import calculate_change_effort
from budget_coach.models.rule import BudgetRule

GOLD = get_rule("50:30:20")


class TestWeights:
    def test_already_on_rule_is_zero(self):
        assert calculate_change_effort(50, 30, 20, GOLD) == 0.0

    def test_needs_cut_weight(self):
        # needs 60 -> 50 only; wants/savings already at target
        assert calculate_change_effort(60, 30, 20, GOLD) == pytest.approx(15.0)

    def test_wants_cut_weight(self):
        assert calculate_change_effort(50, 40, 20, GOLD) == pytest.approx(10.0)

    def test_savings_increase_weight(self):
        assert calculate_change_effort(50, 30, 10, GOLD) == pytest.approx(5.0)

    def test_combined(self):
        # needs -10 (15) + wants -5 (5) + savings +15 (7.5)
        assert calculate_change_effort(60, 35, 5, GOLD) == pytest.approx(27.5)


class TestDirection:
    def test_lenient_target_costs_nothing(self):
        # Target allows more needs, more wants and less savings.
        assert calculate_change_effort(40, 20, 40, GOLD) == 0.0

    def test_savings_decrease_is_not_effort(self):
        rule = BudgetRule(name="low", needs=50, wants=30, savings=0)
        assert calculate_change_effort(50, 30, 20, rule) == 0.0

    def test_effort_is_never_negative(self):
        for current in [(0, 0, 0), (100, 0, 0), (0, 100, 0), (0, 0, 100), (90, 40, 30)]:
            assert calculate_change_effort(*current, GOLD) >= 0.0


class TestAsymmetry:
    def test_savings_only_cheaper_than_needs_cut(self):
        savings_only = calculate_change_effort(50, 30, 10, GOLD)
        with_needs_cut = calculate_change_effort(60, 30, 10, GOLD)
        assert savings_only < with_needs_cut

    def test_needs_cut_harder_than_equal_wants_cut(self):
        needs_cut = calculate_change_effort(60, 30, 20, GOLD)
        wants_cut = calculate_change_effort(50, 40, 20, GOLD)
        assert needs_cut > wants_cut
