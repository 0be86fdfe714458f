from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RawMaterialBase(BaseModel):
    name: str = Field(min_length=1)
    price_per_kg: float = Field(gt=0)


class RawMaterialCreate(RawMaterialBase):
    pass


class RawMaterialUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    price_per_kg: Optional[float] = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class RawMaterialRead(RawMaterialBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
