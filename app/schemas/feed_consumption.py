from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_INTEGER


class FeedConsumptionBase(BaseModel):
    flock_id: int = Field(ge=1, le=MAX_INTEGER)
    finished_feed_id: int = Field(ge=1, le=MAX_INTEGER)
    consumption_date: date
    quantity_kg: float = Field(gt=0)


class FeedConsumptionCreate(FeedConsumptionBase):
    pass


class FeedConsumptionUpdate(BaseModel):
    flock_id: Optional[int] = Field(default=None, ge=1, le=MAX_INTEGER)
    finished_feed_id: Optional[int] = Field(default=None, ge=1, le=MAX_INTEGER)
    consumption_date: Optional[date] = None
    quantity_kg: Optional[float] = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class FeedConsumptionRead(FeedConsumptionBase):
    id: int
    cost: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
