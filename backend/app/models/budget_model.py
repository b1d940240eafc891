from sqlalchemy import Column, Integer, String, Float, UniqueConstraint
from backend.app.db import Base


class Budget(Base):
    __tablename__ = "budgets"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String, index=True, nullable=False)
    month = Column(String(7), index=True, nullable=False)  # e.g. '2025-10'
    budget_amount = Column(Float, nullable=False)

    __table_args__ = (
        UniqueConstraint("category", "month", name="uq_budget_category_month"),
    )
