from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FinishedFeedBase(BaseModel):
    name: str = Field(min_length=1)


class FinishedFeedCreate(FinishedFeedBase):
    # cost_per_kg no se acepta: se deriva de las composiciones
    pass


class FinishedFeedUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)

    model_config = ConfigDict(extra="forbid")


class FinishedFeedRead(FinishedFeedBase):
    id: int
    cost_per_kg: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FeedCostRead(BaseModel):
    finished_feed_id: int
    cost_per_kg: float
