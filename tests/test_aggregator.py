from datetime import date

import pytest

from backend.app.analytics.aggregator import aggregate_by_category, aggregate_by_month
from backend.app.models.transaction_model import Transaction


def txn(amount, day, category="Food"):
    return Transaction(amount=amount, date=day, description="sample", category=category)


def sample_transactions():
    return [
        txn(120.0, date(2024, 1, 3)),
        txn(80.5, date(2023, 12, 30), "Transport"),
        txn(40.0, date(2024, 1, 28), "Utilities"),
        txn(15.25, date(2024, 2, 1)),
        txn(9.75, date(2023, 12, 1), "Other"),
    ]


def test_monthly_totals_are_sorted_oldest_first():
    result = aggregate_by_month(sample_transactions())
    assert [m.month for m in result] == ["2023-12", "2024-01", "2024-02"]
    assert result[0].total == pytest.approx(90.25)
    assert result[0].count == 2
    assert result[1].total == pytest.approx(160.0)


def test_monthly_totals_partition_every_transaction():
    txns = sample_transactions()
    result = aggregate_by_month(txns)
    assert sum(m.count for m in result) == len(txns)
    assert sum(m.total for m in result) == pytest.approx(sum(t.amount for t in txns))
    assert len({m.month for m in result}) == len(result)


def test_monthly_totals_empty_input():
    assert aggregate_by_month([]) == []


def test_category_spend_is_restricted_to_month():
    spend = aggregate_by_category(sample_transactions(), "2024-01")
    assert spend == {"Food": 120.0, "Utilities": 40.0}


def test_category_spend_uses_absolute_amounts():
    txns = [txn(-30.0, date(2024, 5, 2)), txn(20.0, date(2024, 5, 9))]
    assert aggregate_by_category(txns, "2024-05") == {"Food": 50.0}


def test_aggregation_is_repeatable():
    txns = sample_transactions()
    assert aggregate_by_month(txns) == aggregate_by_month(txns)
    assert aggregate_by_category(txns, "2023-12") == aggregate_by_category(txns, "2023-12")
