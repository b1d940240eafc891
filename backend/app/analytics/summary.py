# backend/app/analytics/summary.py
from dataclasses import dataclass
from typing import Iterable

from backend.app.analytics.insights import budget_percentage


@dataclass
class Summary:
    total_budgeted: float
    total_actual: float
    overall_percentage: float
    categories_over_budget: int
    categories_warning: int
    categories_good: int


def summarize(insights: Iterable) -> Summary:
    """Roll category insights up into dashboard counts.

    The buckets here (>=100, 75-100, <75) are coarser than the per-category
    status and are counted from the percentage directly.
    """
    insights = list(insights)
    total_budgeted = sum(i.budgeted for i in insights)
    total_actual = sum(i.actual for i in insights)
    return Summary(
        total_budgeted=total_budgeted,
        total_actual=total_actual,
        overall_percentage=budget_percentage(total_budgeted, total_actual),
        categories_over_budget=sum(1 for i in insights if i.percentage >= 100),
        categories_warning=sum(1 for i in insights if 75 <= i.percentage < 100),
        categories_good=sum(1 for i in insights if i.percentage < 75),
    )
