# backend/app/api/budgets.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.api.params import check_month
from backend.app.db import get_db
from backend.app.models.budget_model import Budget
from backend.app.schemas import BudgetCreate, BudgetOut

logger = logging.getLogger(__name__)

router = APIRouter()

DUPLICATE_DETAIL = "Budget already exists for this category and month"


def _find_existing(db: Session, category: str, month: str) -> Optional[Budget]:
    return db.query(Budget).filter(Budget.category == category, Budget.month == month).first()


def _commit(db: Session, action: str):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail=DUPLICATE_DETAIL)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to %s", action)
        raise HTTPException(status_code=500, detail=f"Failed to {action}")


@router.get("/", response_model=List[BudgetOut])
def list_budgets(month: Optional[str] = Query(None), db: Session = Depends(get_db)):
    query = db.query(Budget)
    month = check_month(month)
    if month:
        query = query.filter(Budget.month == month)
    return query.order_by(Budget.month.desc(), Budget.id).all()


@router.post("/", response_model=BudgetOut, status_code=201)
def add_budget(budget: BudgetCreate, db: Session = Depends(get_db)):
    if _find_existing(db, budget.category, budget.month):
        raise HTTPException(status_code=400, detail=DUPLICATE_DETAIL)
    new_budget = Budget(**budget.model_dump())
    db.add(new_budget)
    _commit(db, "create budget")
    db.refresh(new_budget)
    logger.info("Created budget %s (%s %s)", new_budget.id, new_budget.category, new_budget.month)
    return new_budget


@router.post("/bulk", response_model=List[BudgetOut], status_code=201)
def create_budgets_bulk(payloads: List[BudgetCreate], db: Session = Depends(get_db)):
    """
    Create several budgets at once.  Any duplicate, against the store or within
    the payload itself, rejects the whole batch.
    """
    seen = set()
    for payload in payloads:
        key = (payload.category, payload.month)
        if key in seen or _find_existing(db, *key):
            raise HTTPException(
                status_code=400,
                detail=f"{DUPLICATE_DETAIL}: {payload.category} {payload.month}",
            )
        seen.add(key)

    results = [Budget(**payload.model_dump()) for payload in payloads]
    db.add_all(results)
    _commit(db, "create budgets")
    for b in results:
        db.refresh(b)
    logger.info("Created %d budgets", len(results))
    return results


@router.get("/{budget_id}", response_model=BudgetOut)
def get_budget(budget_id: int, db: Session = Depends(get_db)):
    budget = db.get(Budget, budget_id)
    if budget is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    return budget


@router.put("/{budget_id}", response_model=BudgetOut)
def update_budget(budget_id: int, payload: BudgetCreate, db: Session = Depends(get_db)):
    budget = db.get(Budget, budget_id)
    if budget is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    existing = _find_existing(db, payload.category, payload.month)
    if existing and existing.id != budget.id:
        raise HTTPException(status_code=400, detail=DUPLICATE_DETAIL)

    budget.category = payload.category
    budget.month = payload.month
    budget.budget_amount = payload.budget_amount
    _commit(db, "update budget")
    db.refresh(budget)
    logger.info("Updated budget %s", budget.id)
    return budget


@router.delete("/{budget_id}")
def delete_budget(budget_id: int, db: Session = Depends(get_db)):
    budget = db.get(Budget, budget_id)
    if budget is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    db.delete(budget)
    _commit(db, "delete budget")
    logger.info("Deleted budget %s", budget_id)
    return {"message": "Budget deleted successfully"}
