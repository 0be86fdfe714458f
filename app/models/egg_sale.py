from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum, Float, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base
from .enums import EggQuality


class EggSale(Base):
    __tablename__ = "egg_sales"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sale_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    quality: Mapped[EggQuality] = mapped_column(
        Enum(EggQuality, name="egg_quality"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_egg: Mapped[float] = mapped_column(Float, nullable=False)

    # quantity * price_per_egg
    total_price: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<EggSale id={self.id!r} date={self.sale_date!r} total={self.total_price!r}>"
