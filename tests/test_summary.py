import pytest

from backend.app.analytics.insights import classify
from backend.app.analytics.summary import Summary, summarize


def test_empty_summary_is_all_zero():
    assert summarize([]) == Summary(
        total_budgeted=0,
        total_actual=0,
        overall_percentage=0.0,
        categories_over_budget=0,
        categories_warning=0,
        categories_good=0,
    )


def test_buckets_use_75_and_100_boundaries():
    insights = [classify(100, actual, 30, 10, "Food") for actual in (120, 100, 95, 75, 74.9, 10)]
    summary = summarize(insights)
    assert summary.categories_over_budget == 2
    assert summary.categories_warning == 2
    assert summary.categories_good == 2
    assert summary.total_budgeted == 600
    assert summary.total_actual == pytest.approx(474.9)
    assert summary.overall_percentage == pytest.approx(79.15)


def test_zero_budget_lands_in_good_bucket():
    summary = summarize([classify(0, 80, 30, 10, "Other")])
    assert summary.categories_good == 1
    assert summary.categories_over_budget == 0
    assert summary.overall_percentage == 0.0

