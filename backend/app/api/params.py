# backend/app/api/params.py
from typing import Optional

from fastapi import HTTPException

from backend.app.analytics.months import parse_month


def check_month(month: Optional[str]) -> Optional[str]:
    """Validate an optional ``month`` query parameter, 400 when malformed."""
    if month is None:
        return None
    try:
        parse_month(month)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return month
