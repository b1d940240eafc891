# backend/app/api/analytics.py
"""Read-only views computed from the stored transactions and budgets.

``today`` can be passed on every endpoint so results are reproducible; it
defaults to the server date.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.analytics.aggregator import aggregate_by_month
from backend.app.analytics.comparator import build_comparison
from backend.app.analytics.insights import build_insights
from backend.app.analytics.months import month_key
from backend.app.analytics.overview import category_breakdown, overview
from backend.app.analytics.summary import summarize
from backend.app.api.params import check_month
from backend.app.db import get_db
from backend.app.models.budget_model import Budget
from backend.app.models.transaction_model import Transaction
from backend.app.schemas import (
    CategoryTotalOut,
    ComparisonRowOut,
    InsightReport,
    MonthlyTotalOut,
    OverviewOut,
)

router = APIRouter()


def _selected_month(month: Optional[str], today: Optional[date]) -> str:
    return check_month(month) or month_key(today or date.today())


@router.get("/monthly", response_model=List[MonthlyTotalOut])
def monthly_totals(db: Session = Depends(get_db)):
    return aggregate_by_month(db.query(Transaction).all())


@router.get("/categories", response_model=List[CategoryTotalOut])
def categories(month: Optional[str] = Query(None), db: Session = Depends(get_db)):
    month = check_month(month)
    txns = db.query(Transaction).all()
    if month:
        txns = [t for t in txns if month_key(t.date) == month]
    return category_breakdown(txns)


@router.get("/comparison", response_model=List[ComparisonRowOut])
def budget_vs_actual(month: Optional[str] = Query(None), today: Optional[date] = Query(None),
                     db: Session = Depends(get_db)):
    month = _selected_month(month, today)
    budgets = db.query(Budget).filter(Budget.month == month).order_by(Budget.id).all()
    return build_comparison(budgets, db.query(Transaction).all(), month)


@router.get("/insights", response_model=InsightReport)
def insights(month: Optional[str] = Query(None), today: Optional[date] = Query(None),
             db: Session = Depends(get_db)):
    month = _selected_month(month, today)
    budgets = db.query(Budget).filter(Budget.month == month).order_by(Budget.id).all()
    result = build_insights(budgets, db.query(Transaction).all(), month, today or date.today())
    return {"month": month, "insights": result, "summary": summarize(result)}


@router.get("/overview", response_model=OverviewOut)
def dashboard_overview(today: Optional[date] = Query(None), db: Session = Depends(get_db)):
    return overview(db.query(Transaction).all(), today or date.today())
