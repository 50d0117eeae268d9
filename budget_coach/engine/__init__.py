"""
Budget recommendation engine: matches a spending pattern to a canonical
budgeting rule and produces prioritized, never-regressive coaching advice.

Modules
-------
catalog      : BUDGET_RULES + get_rule() + gold_standard_rule() — static table.
matcher      : find_best_rule() — unweighted distance match against the catalog.
effort       : calculate_change_effort() — weighted, asymmetric difficulty score.
selector     : find_most_achievable_rule() — lowest-effort rule that saves more.
alternatives : generate_overspending_alternatives() +
               generate_needs_reduction_alternatives().
recommender  : get_next_recommendation() + recommend_for_snapshot() —
               strict-priority decision procedure.
category     : generate_category_recommendations() +
               generate_overspending_recommendations() — per-category messages.
calculations : build_simple_snapshot() + build_detailed_snapshot() +
               expense_breakdown() — raw totals to BudgetSnapshot.

Every function here is pure: no I/O, no configuration lookups, no shared
mutable state.
"""
