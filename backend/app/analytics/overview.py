# backend/app/analytics/overview.py
"""Dashboard figures over the whole transaction history."""
from datetime import date
from typing import Dict, Iterable, List

from backend.app.analytics.months import month_key, previous_month
from backend.app.models.category_model import DEFAULT_CATEGORY


def category_breakdown(transactions: Iterable) -> List[Dict]:
    totals: Dict[str, float] = {}
    for txn in transactions:
        cat = txn.category or DEFAULT_CATEGORY
        totals[cat] = totals.get(cat, 0.0) + txn.amount
    grand_total = sum(totals.values())

    rows = [
        {
            "category": cat,
            "total": total,
            "percentage": (total / grand_total * 100) if grand_total > 0 else 0.0,
        }
        for cat, total in totals.items()
    ]
    rows.sort(key=lambda r: r["total"], reverse=True)
    return rows


def overview(transactions: Iterable, today: date, top_n: int = 3, recent_n: int = 5) -> Dict:
    """Totals, month-over-month change, top categories and latest transactions."""
    transactions = list(transactions)
    this_month = month_key(today)
    last_month = previous_month(this_month)

    this_month_total = sum(t.amount for t in transactions if month_key(t.date) == this_month)
    last_month_total = sum(t.amount for t in transactions if month_key(t.date) == last_month)
    monthly_change = (
        (this_month_total - last_month_total) / last_month_total * 100
        if last_month_total > 0
        else 0.0
    )

    recent = sorted(transactions, key=lambda t: t.date, reverse=True)[:recent_n]

    return {
        "total_expenses": sum(t.amount for t in transactions),
        "transaction_count": len(transactions),
        "this_month": this_month,
        "this_month_total": this_month_total,
        "last_month_total": last_month_total,
        "monthly_change": monthly_change,
        "top_categories": category_breakdown(transactions)[:top_n],
        "recent_transactions": recent,
    }
