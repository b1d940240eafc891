import pytest


@pytest.fixture
def seeded(client):
    for category, amount in [("Food", 1000), ("Transport", 200), ("Education", 500)]:
        client.post("/budgets/", json={"category": category, "month": "2024-03", "budget_amount": amount})
    client.post("/budgets/", json={"category": "Food", "month": "2024-04", "budget_amount": 10})
    for amount, day, description, category in [
        (400, "2024-03-05", "Weekly groceries", "Food"),
        (100, "2024-03-20", "Dinner out", "Food"),
        (250, "2024-03-10", "Train tickets", "Transport"),
        (60, "2024-03-11", "Cinema tickets", "Entertainment"),
        (75, "2024-02-14", "Groceries again", "Food"),
    ]:
        client.post("/transactions/", json={
            "amount": amount, "date": day, "description": description, "category": category,
        })
    return client


def test_monthly_totals(seeded):
    data = seeded.get("/analytics/monthly").json()
    assert data == [
        {"month": "2024-02", "total": 75.0, "count": 1},
        {"month": "2024-03", "total": 810.0, "count": 4},
    ]


def test_category_breakdown(seeded):
    rows = seeded.get("/analytics/categories", params={"month": "2024-03"}).json()
    assert rows[0]["category"] == "Food"
    assert rows[0]["total"] == 500.0
    assert sum(r["percentage"] for r in rows) == pytest.approx(100.0)


def test_comparison(seeded):
    rows = seeded.get("/analytics/comparison", params={"month": "2024-03"}).json()
    assert [r["category"] for r in rows] == ["Food", "Education", "Transport"]
    by_cat = {r["category"]: r for r in rows}
    assert by_cat["Transport"]["status"] == "over"
    assert by_cat["Transport"]["difference"] == 50.0
    assert by_cat["Food"]["status"] == "under"
    assert by_cat["Education"]["actual"] == 0


def test_insights_report(seeded):
    resp = seeded.get("/analytics/insights", params={"month": "2024-03", "today": "2024-03-15"})
    assert resp.status_code == 200
    report = resp.json()
    assert report["month"] == "2024-03"
    assert [i["category"] for i in report["insights"]] == ["Transport", "Food", "Education"]
    transport = report["insights"][0]
    assert transport["status"] == "danger"
    assert transport["days_elapsed"] == 15
    assert "spending faster than expected" in transport["message"]
    assert report["summary"] == {
        "total_budgeted": 1700.0,
        "total_actual": 750.0,
        "overall_percentage": pytest.approx(750 / 1700 * 100),
        "categories_over_budget": 1,
        "categories_warning": 0,
        "categories_good": 2,
    }


def test_insights_default_to_month_of_today(seeded):
    report = seeded.get("/analytics/insights", params={"today": "2024-04-02"}).json()
    assert report["month"] == "2024-04"
    assert report["insights"][0]["category"] == "Food"
    assert report["insights"][0]["actual"] == 0


def test_insights_without_budgets(seeded):
    report = seeded.get("/analytics/insights", params={"month": "2025-01", "today": "2025-01-10"}).json()
    assert report["insights"] == []
    assert report["summary"]["overall_percentage"] == 0


def test_insights_bad_month(seeded):
    assert seeded.get("/analytics/insights", params={"month": "March"}).status_code == 400


def test_overview(seeded):
    data = seeded.get("/analytics/overview", params={"today": "2024-03-25"}).json()
    assert data["transaction_count"] == 5
    assert data["this_month_total"] == 810.0
    assert data["last_month_total"] == 75.0
    assert data["monthly_change"] == pytest.approx((810 - 75) / 75 * 100)
    assert [c["category"] for c in data["top_categories"]] == ["Food", "Transport", "Entertainment"]
    assert data["recent_transactions"][0]["description"] == "Dinner out"


def test_root(client):
    assert client.get("/").json() == {"message": "Budget Insights API is running!"}


def test_comparison_defaults_to_month_of_today(seeded):
    rows = seeded.get("/analytics/comparison", params={"today": "2024-04-20"}).json()
    assert rows == [
        {"category": "Food", "budgeted": 10.0, "actual": 0.0, "difference": -10.0, "status": "under"},
    ]
    march = seeded.get("/analytics/comparison", params={"today": "2024-03-02"}).json()
    assert len(march) == 3


def test_app_import_string_resolves_for_uvicorn():
    from uvicorn.importer import import_from_string

    from backend.app.main import app

    assert import_from_string("backend.app.main:app") is app
