# backend/app/analytics/comparator.py
from dataclasses import dataclass
from typing import Dict, Iterable, List

from backend.app.analytics.aggregator import aggregate_by_category

# share of the budget either side of it that still counts as on track
TOLERANCE = 0.1


@dataclass
class ComparisonRow:
    category: str
    budgeted: float
    actual: float
    difference: float
    status: str  # 'under' | 'over' | 'ontrack'


def comparison_status(budgeted: float, difference: float) -> str:
    if difference > budgeted * TOLERANCE:
        return "over"
    elif abs(difference) <= budgeted * TOLERANCE:
        return "ontrack"
    return "under"


def compare(budgets: Iterable, actual_by_category: Dict[str, float]) -> List[ComparisonRow]:
    """One row per budget, largest budget first.

    Categories with spending but no budget do not show up here.
    """
    rows = []
    for budget in budgets:
        budgeted = budget.budget_amount
        actual = actual_by_category.get(budget.category, 0.0)
        difference = actual - budgeted
        rows.append(ComparisonRow(
            category=budget.category,
            budgeted=budgeted,
            actual=actual,
            difference=difference,
            status=comparison_status(budgeted, difference),
        ))
    # sorted() is stable, equal budgets keep their input order
    return sorted(rows, key=lambda r: r.budgeted, reverse=True)


def build_comparison(budgets: Iterable, transactions: Iterable, month: str) -> List[ComparisonRow]:
    month_budgets = [b for b in budgets if b.month == month]
    if not month_budgets:
        return []
    return compare(month_budgets, aggregate_by_category(transactions, month))
