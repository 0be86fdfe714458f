from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base
from .enums import ExpenseType


class OtherExpense(Base):
    __tablename__ = "other_expenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    expense_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    # En BD la columna es "expense_type"; el pydantic usa el mismo nombre
    expense_type: Mapped[ExpenseType] = mapped_column(
        Enum(ExpenseType, name="expense_type"), nullable=False
    )
    description: Mapped[str] = mapped_column(String, nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<OtherExpense id={self.id!r} type={self.expense_type!r} amount={self.amount!r}>"
