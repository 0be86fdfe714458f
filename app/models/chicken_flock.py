from __future__ import annotations

from datetime import date, datetime
from typing import List

from sqlalchemy import Date, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class ChickenFlock(Base):
    __tablename__ = "chicken_flocks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    strain: Mapped[str] = mapped_column(String, nullable=False)  # estirpe
    entry_date: Mapped[date] = mapped_column(Date, nullable=False)

    initial_count: Mapped[int] = mapped_column(Integer, nullable=False)
    age_upon_entry_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    current_count: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    feed_consumptions: Mapped[List["FeedConsumption"]] = relationship(
        back_populates="flock",
    )
    egg_productions: Mapped[List["EggProduction"]] = relationship(
        back_populates="flock",
    )

    def __repr__(self) -> str:
        return f"<ChickenFlock id={self.id!r} strain={self.strain!r}>"

    @property
    def mortality(self) -> int:
        return self.initial_count - self.current_count
