# backend/app/analytics/insights.py
"""Per-category spending insights: a severity status plus advisory text.

The status comes from how much of the budget is used.  When part of the month
has passed, the message also says whether spending is running ahead of or
behind the calendar.
"""
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

from backend.app.analytics.aggregator import aggregate_by_category
from backend.app.analytics.months import days_elapsed, days_in_month, parse_month
from backend.app.config import CURRENCY_SYMBOL

# pacing band around the share of the month already elapsed
PACING_LOW = 0.8
PACING_HIGH = 1.2


@dataclass
class CategoryInsight:
    category: str
    budgeted: float
    actual: float
    percentage: float
    status: str  # 'danger' | 'warning' | 'good' | 'excellent'
    message: str
    days_in_month: int
    days_elapsed: int


def format_currency(amount: float) -> str:
    """Two decimals with Indian digit grouping, e.g. ``₹1,23,456.78``."""
    sign = "-" if amount < 0 else ""
    whole, fraction = f"{abs(amount):.2f}".split(".")
    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    grouped = ",".join(groups + [tail])
    return f"{sign}{CURRENCY_SYMBOL}{grouped}.{fraction}"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def budget_percentage(budgeted: float, actual: float) -> float:
    if budgeted <= 0:
        return 0.0
    return actual / budgeted * 100


def _status_and_message(category: str, budgeted: float, actual: float, percentage: float):
    remaining = budgeted - actual
    if percentage >= 100:
        return "danger", (f"Over budget by {format_currency(actual - budgeted)}! "
                          f"Consider reducing {category} expenses.")
    elif percentage >= 90:
        return "warning", (f"90% of budget used. Only {format_currency(remaining)} "
                           f"left for {category}.")
    elif percentage >= 75:
        return "warning", (f"75% through your {category} budget. "
                           f"{format_currency(remaining)} remaining.")
    elif percentage >= 50:
        return "good", (f"Halfway through {category} budget. "
                        f"{format_currency(remaining)} left.")
    elif percentage >= 25:
        return "good", (f"Good spending control in {category}. "
                        f"{round_half_up(100 - percentage)}% budget remaining.")
    return "excellent", (f"Excellent spending control in {category}! "
                         f"Only {round_half_up(percentage)}% used.")


def pacing_note(percentage: float, month_days: int, elapsed: int) -> str:
    """Sentence comparing budget use with the share of the month gone, or ''."""
    time_percentage = elapsed / month_days * 100 if elapsed > 0 else 0
    if time_percentage <= 0:
        return ""
    if percentage < time_percentage * PACING_LOW:
        return (f"You're pacing well - spending {round_half_up(percentage)}% "
                f"with {round_half_up(time_percentage)}% of month passed.")
    if percentage > time_percentage * PACING_HIGH:
        return (f"You're spending faster than expected - {round_half_up(percentage)}% "
                f"used with only {round_half_up(time_percentage)}% of month passed.")
    return ""


def classify(budgeted: float, actual: float, month_days: int, elapsed: int,
             category: str = "") -> CategoryInsight:
    percentage = budget_percentage(budgeted, actual)
    status, message = _status_and_message(category, budgeted, actual, percentage)
    note = pacing_note(percentage, month_days, elapsed)
    if note:
        message = f"{message} {note}"
    return CategoryInsight(
        category=category,
        budgeted=budgeted,
        actual=actual,
        percentage=percentage,
        status=status,
        message=message,
        days_in_month=month_days,
        days_elapsed=elapsed,
    )


def build_insights(budgets: Iterable, transactions: Iterable, month: str,
                   today: date) -> List[CategoryInsight]:
    """Insights for every budget of ``month``, most used budget first."""
    year, month_num = parse_month(month)
    month_budgets = [b for b in budgets if b.month == month]
    if not month_budgets:
        return []

    month_days = days_in_month(year, month_num)
    elapsed = days_elapsed(year, month_num, today)
    actual_spending = aggregate_by_category(transactions, month)

    insights = [
        classify(b.budget_amount, actual_spending.get(b.category, 0.0),
                 month_days, elapsed, category=b.category)
        for b in month_budgets
    ]
    return sorted(insights, key=lambda i: i.percentage, reverse=True)
