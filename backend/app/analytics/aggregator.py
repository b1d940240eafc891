# backend/app/analytics/aggregator.py
from dataclasses import dataclass
from typing import Dict, Iterable, List

from backend.app.analytics.months import month_key


@dataclass
class MonthlyTotal:
    month: str
    total: float
    count: int


def aggregate_by_month(transactions: Iterable) -> List[MonthlyTotal]:
    """Total and count of transactions per month key, oldest month first."""
    grouped: Dict[str, MonthlyTotal] = {}
    for txn in transactions:
        key = month_key(txn.date)
        if key not in grouped:
            grouped[key] = MonthlyTotal(month=key, total=0.0, count=0)
        grouped[key].total += txn.amount
        grouped[key].count += 1
    return [grouped[k] for k in sorted(grouped)]


def aggregate_by_category(transactions: Iterable, month: str) -> Dict[str, float]:
    """Spend per category for one month; amounts count by absolute value."""
    spend: Dict[str, float] = {}
    for txn in transactions:
        if month_key(txn.date) != month:
            continue
        spend[txn.category] = spend.get(txn.category, 0.0) + abs(txn.amount)
    return spend
