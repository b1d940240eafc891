# backend/app/api/transactions.py
import logging
from datetime import date, datetime
from typing import List, Optional

import pandas as pd
from fastapi import APIRouter, Depends, UploadFile, File, HTTPException, Query
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.analytics.months import month_key
from backend.app.api.params import check_month
from backend.app.db import get_db
from backend.app.models.transaction_model import Transaction
from backend.app.schemas import TransactionIn, TransactionOut

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_or_404(db: Session, transaction_id: int) -> Transaction:
    txn = db.get(Transaction, transaction_id)
    if txn is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return txn


def _commit(db: Session, action: str):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to %s", action)
        raise HTTPException(status_code=500, detail=f"Failed to {action}")


@router.get("/", response_model=List[TransactionOut])
def list_transactions(month: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """
    All transactions, newest first.  ``month`` (YYYY-MM) narrows to one month.
    """
    month = check_month(month)
    txns = db.query(Transaction).order_by(Transaction.date.desc(), Transaction.id.desc()).all()
    if month:
        txns = [t for t in txns if month_key(t.date) == month]
    return txns


@router.post("/", response_model=TransactionOut, status_code=201)
def create_transaction(payload: TransactionIn, db: Session = Depends(get_db)):
    txn = Transaction(**payload.model_dump())
    db.add(txn)
    _commit(db, "create transaction")
    db.refresh(txn)
    logger.info("Created transaction %s (%s, %.2f)", txn.id, txn.category, txn.amount)
    return txn


@router.post("/upload-csv")
def upload_transactions_csv(file: UploadFile = File(...), db: Session = Depends(get_db)):
    """
    Upload a CSV with columns: description, amount, (optional) date, (optional) category.
    Rows are validated like single transactions; nothing is saved if any row fails.
    A missing date falls back to today, a missing category is inferred from the description.
    """
    try:
        df = pd.read_csv(file.file)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=400, detail=f"Unable to read CSV: {e}")

    df.columns = [str(c).strip().lower() for c in df.columns]
    if not {"description", "amount"}.issubset(df.columns):
        raise HTTPException(status_code=400, detail="CSV must have 'description' and 'amount' columns")

    validated: List[TransactionIn] = []
    for line, row in enumerate(df.to_dict(orient="records"), start=2):
        record = {
            "description": "" if pd.isna(row["description"]) else str(row["description"]),
            "amount": row["amount"],
            "date": row.get("date") if not pd.isna(row.get("date")) else date.today(),
            "category": row.get("category") if not pd.isna(row.get("category")) else None,
        }
        try:
            validated.append(TransactionIn(**record))
        except ValidationError as e:
            raise HTTPException(
                status_code=400,
                detail=f"Validation error on line {line} ('{record['description']}'): "
                       f"{e.errors()[0]['msg']}",
            )

    for payload in validated:
        db.add(Transaction(**payload.model_dump()))
    _commit(db, "save uploaded transactions")
    logger.info("Imported %d transactions from %s", len(validated), file.filename)
    return {"message": f"{len(validated)} transactions uploaded, classified and saved.",
            "saved": len(validated)}


@router.delete("/clear")
def clear_transactions(db: Session = Depends(get_db)):
    try:
        deleted = db.query(Transaction).delete()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to clear transactions")
        raise HTTPException(status_code=500, detail="Failed to clear transactions")
    logger.info("Deleted %d transactions", deleted)
    return {"message": f"Deleted {deleted} transactions successfully."}


@router.get("/{transaction_id}", response_model=TransactionOut)
def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, transaction_id)


@router.put("/{transaction_id}", response_model=TransactionOut)
def update_transaction(transaction_id: int, payload: TransactionIn, db: Session = Depends(get_db)):
    txn = _get_or_404(db, transaction_id)
    for field, value in payload.model_dump().items():
        setattr(txn, field, value)
    txn.updated_at = datetime.utcnow()
    _commit(db, "update transaction")
    db.refresh(txn)
    logger.info("Updated transaction %s", txn.id)
    return txn


@router.delete("/{transaction_id}")
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    txn = _get_or_404(db, transaction_id)
    db.delete(txn)
    _commit(db, "delete transaction")
    logger.info("Deleted transaction %s", transaction_id)
    return {"message": "Transaction deleted successfully"}
