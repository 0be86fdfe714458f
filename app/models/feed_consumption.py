from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class FeedConsumption(Base):
    __tablename__ = "feed_consumptions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flock_id: Mapped[int] = mapped_column(
        ForeignKey("chicken_flocks.id"), nullable=False, index=True
    )
    finished_feed_id: Mapped[int] = mapped_column(
        ForeignKey("finished_feeds.id"), nullable=False, index=True
    )
    consumption_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    quantity_kg: Mapped[float] = mapped_column(Float, nullable=False)

    # quantity_kg * cost_per_kg del pienso en el momento de escribir
    cost: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    flock: Mapped["ChickenFlock"] = relationship(back_populates="feed_consumptions")
    finished_feed: Mapped["FinishedFeed"] = relationship(back_populates="consumptions")

    def __repr__(self) -> str:
        return (
            f"<FeedConsumption id={self.id!r} flock={self.flock_id!r} "
            f"date={self.consumption_date!r}>"
        )
