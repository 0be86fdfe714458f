from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_INTEGER
from app.models.enums import EggQuality


class EggProductionBase(BaseModel):
    flock_id: int = Field(ge=1, le=MAX_INTEGER)
    production_date: date
    quality: EggQuality
    quantity: int = Field(ge=0, le=MAX_INTEGER)


class EggProductionCreate(EggProductionBase):
    pass


class EggProductionUpdate(BaseModel):
    flock_id: Optional[int] = Field(default=None, ge=1, le=MAX_INTEGER)
    production_date: Optional[date] = None
    quality: Optional[EggQuality] = None
    quantity: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)

    model_config = ConfigDict(extra="forbid")


class EggProductionRead(EggProductionBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
