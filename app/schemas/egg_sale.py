from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_INTEGER
from app.models.enums import EggQuality


class EggSaleBase(BaseModel):
    sale_date: date
    quality: EggQuality
    quantity: int = Field(gt=0, le=MAX_INTEGER)
    price_per_egg: float = Field(gt=0)


class EggSaleCreate(EggSaleBase):
    pass


class EggSaleUpdate(BaseModel):
    sale_date: Optional[date] = None
    quality: Optional[EggQuality] = None
    quantity: Optional[int] = Field(default=None, gt=0, le=MAX_INTEGER)
    price_per_egg: Optional[float] = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class EggSaleRead(EggSaleBase):
    id: int
    total_price: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
