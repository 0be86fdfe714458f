from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_INTEGER


class ChickenFlockBase(BaseModel):
    strain: str = Field(min_length=1)
    entry_date: date
    initial_count: int = Field(gt=0, le=MAX_INTEGER)
    age_upon_entry_days: int = Field(default=0, ge=0, le=MAX_INTEGER)


class ChickenFlockCreate(ChickenFlockBase):
    # current_count arranca igual a initial_count
    pass


class ChickenFlockUpdate(BaseModel):
    strain: Optional[str] = Field(default=None, min_length=1)
    entry_date: Optional[date] = None
    initial_count: Optional[int] = Field(default=None, gt=0, le=MAX_INTEGER)
    age_upon_entry_days: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)
    current_count: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)

    model_config = ConfigDict(extra="forbid")


class ChickenFlockRead(ChickenFlockBase):
    id: int
    current_count: int
    mortality: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
