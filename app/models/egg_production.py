from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base
from .enums import EggQuality


class EggProduction(Base):
    __tablename__ = "egg_productions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flock_id: Mapped[int] = mapped_column(
        ForeignKey("chicken_flocks.id"), nullable=False, index=True
    )
    production_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    quality: Mapped[EggQuality] = mapped_column(
        Enum(EggQuality, name="egg_quality"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    flock: Mapped["ChickenFlock"] = relationship(back_populates="egg_productions")

    def __repr__(self) -> str:
        return (
            f"<EggProduction id={self.id!r} flock={self.flock_id!r} "
            f"date={self.production_date!r} quality={self.quality!r}>"
        )
