# backend/app/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional
from datetime import date, datetime

from backend.app.analytics.months import parse_month
from backend.app.models.category_model import CATEGORIES, classify_description, normalize_category


def _canonical_category(value: str) -> str:
    category = normalize_category(value)
    if category is None:
        raise ValueError(f"Unknown category '{value}', expected one of: {', '.join(CATEGORIES)}")
    return category


# Pydantic schema for incoming transaction objects (used for validation)
class TransactionIn(BaseModel):
    amount: float = Field(gt=0, allow_inf_nan=False)
    date: date
    description: str
    category: Optional[str] = None

    @field_validator("description")
    @classmethod
    def description_min_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Description must be at least 3 characters")
        return v

    @field_validator("category")
    @classmethod
    def known_category(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return _canonical_category(v)

    @model_validator(mode="after")
    def infer_category(self):
        if self.category is None:
            self.category = classify_description(self.description)
        return self


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: float
    date: date
    description: str
    category: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BudgetCreate(BaseModel):
    category: str
    month: str
    budget_amount: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("category")
    @classmethod
    def known_category(cls, v: str) -> str:
        return _canonical_category(v)

    @field_validator("month")
    @classmethod
    def month_format(cls, v: str) -> str:
        parse_month(v)
        return v


class BudgetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category: str
    month: str
    budget_amount: float


class Descriptions(BaseModel):
    descriptions: List[str]


class MonthlyTotalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: str
    total: float
    count: int


class CategoryTotalOut(BaseModel):
    category: str
    total: float
    percentage: float


class ComparisonRowOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    budgeted: float
    actual: float
    difference: float
    status: str


class CategoryInsightOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    budgeted: float
    actual: float
    percentage: float
    status: str
    message: str
    days_in_month: int
    days_elapsed: int


class SummaryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_budgeted: float
    total_actual: float
    overall_percentage: float
    categories_over_budget: int
    categories_warning: int
    categories_good: int


class InsightReport(BaseModel):
    month: str
    insights: List[CategoryInsightOut]
    summary: SummaryOut


class OverviewOut(BaseModel):
    total_expenses: float
    transaction_count: int
    this_month: str
    this_month_total: float
    last_month_total: float
    monthly_change: float
    top_categories: List[CategoryTotalOut]
    recent_transactions: List[TransactionOut]
