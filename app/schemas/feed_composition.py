from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_INTEGER


class FeedCompositionBase(BaseModel):
    finished_feed_id: int = Field(ge=1, le=MAX_INTEGER)
    raw_material_id: int = Field(ge=1, le=MAX_INTEGER)
    percentage: float = Field(ge=0, le=100)


class FeedCompositionCreate(FeedCompositionBase):
    pass


class FeedCompositionUpdate(BaseModel):
    # Solo el porcentaje; para cambiar feed/material se borra y se crea otra
    percentage: Optional[float] = Field(default=None, ge=0, le=100)

    model_config = ConfigDict(extra="forbid")


class FeedCompositionRead(FeedCompositionBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
