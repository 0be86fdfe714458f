from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import ExpenseType


class OtherExpenseBase(BaseModel):
    expense_date: date
    expense_type: ExpenseType
    description: str = Field(min_length=1)
    amount: float = Field(gt=0)


class OtherExpenseCreate(OtherExpenseBase):
    pass


class OtherExpenseUpdate(BaseModel):
    expense_date: Optional[date] = None
    expense_type: Optional[ExpenseType] = None
    description: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[float] = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class OtherExpenseRead(OtherExpenseBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
