"""
Tests for budget_coach/engine/matcher.py.

What we test
------------
find_best_rule():
  - Zero income returns the first rule with score 0 (no division error).
  - Exact rule patterns score 0 against their own rule.
  - Ties go to the earlier catalog rule.
  - Score equals the sum of absolute percentage differences.
  - Repeated calls return identical results.
"""

from __future__ import annotations

import pytest

from budget_coach.engine.catalog import BUDGET_RULES
from budget_coach.engine.matcher import distance_score, find_best_rule
from budget_coach.models.rule import BudgetRule


class TestZeroIncome:
    def test_all_zero_returns_first_rule(self):
        result = find_best_rule(0, 0, 0, 0)
        assert result.rule == BUDGET_RULES[0]
        assert result.score == 0.0

    def test_zero_income_ignores_totals(self):
        result = find_best_rule(0, 500, 500, 0)
        assert result.rule.name == "50:30:20"
        assert result.score == 0.0


class TestExactMatches:
    @pytest.mark.parametrize(
        "needs, wants, savings, expected",
        [
            (500, 300, 200, "50:30:20"),
            (700, 200, 100, "70:20:10"),
            (800, 200, 0,   "80:20:0"),
        ],
    )
    def test_exact_pattern_scores_zero(self, needs, wants, savings, expected):
        result = find_best_rule(1000, needs, wants, savings)
        assert result.rule.name == expected
        assert result.score == pytest.approx(0.0)


class TestTieBreak:
    def test_tie_scenario_prefers_earlier_rule(self):
        # 60/20/20: |60-50|+|20-30|+0 = 20 and |60-70|+0+|20-10| = 20
        result = find_best_rule(5000, 3000, 1000, 1000)
        assert result.rule.name == "50:30:20"
        assert result.score == pytest.approx(20.0)

    def test_second_tie_example(self):
        # 60/25/15 scores 20 against both of the first two rules.
        result = find_best_rule(100, 60, 25, 15)
        assert result.rule.name == "50:30:20"
        assert result.score == pytest.approx(20.0)

    def test_custom_rule_order_is_respected(self):
        a = BudgetRule(name="a", needs=50, wants=30, savings=20)
        b = BudgetRule(name="b", needs=50, wants=30, savings=20)
        assert find_best_rule(100, 50, 30, 20, rules=[b, a]).rule.name == "b"


class TestScore:
    def test_distance_score_formula(self):
        rule = BUDGET_RULES[2]  # 80:20:0
        assert distance_score(60, 25, 15, rule) == pytest.approx(20 + 5 + 15)

    def test_needs_heavy_pattern_matches_80_20_0(self):
        result = find_best_rule(1000, 780, 210, 10)
        assert result.rule.name == "80:20:0"
        assert result.score == pytest.approx(2 + 1 + 1)

    def test_score_is_never_negative(self):
        result = find_best_rule(1000, 100, 100, 800)
        assert result.score >= 0.0


def test_deterministic():
    assert find_best_rule(4321, 2100, 900, 500) == find_best_rule(4321, 2100, 900, 500)
