"""
Canonical budgeting rules.

Catalog order is needs-light to needs-heavy (equivalently savings-heavy to
savings-free) and is the tie-break everywhere the catalog is scanned: the
first rule with the best score wins.
"""

from __future__ import annotations

from budget_coach.models.rule import BudgetRule

GOLD_STANDARD_RULE_NAME = "50:30:20"

BUDGET_RULES: tuple[BudgetRule, ...] = (
    BudgetRule(name="50:30:20", needs=50, wants=30, savings=20),
    BudgetRule(name="70:20:10", needs=70, wants=20, savings=10),
    BudgetRule(name="80:20:0",  needs=80, wants=20, savings=0),
)

_RULES_BY_NAME: dict[str, BudgetRule] = {rule.name: rule for rule in BUDGET_RULES}


def get_rule(name: str) -> BudgetRule:
    """Return the catalog rule called ``name``.

    Raises:
        KeyError: If no rule has that name.
    """
    try:
        return _RULES_BY_NAME[name]
    except KeyError:
        raise KeyError(
            f"Unknown budget rule '{name}'. Known rules: {sorted(_RULES_BY_NAME)}"
        ) from None


def gold_standard_rule() -> BudgetRule:
    """The 50:30:20 rule, falling back to the first catalog entry."""
    return _RULES_BY_NAME.get(GOLD_STANDARD_RULE_NAME, BUDGET_RULES[0])
