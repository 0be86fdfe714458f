from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class FinishedFeed(Base):
    __tablename__ = "finished_feeds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    # Derivado de las composiciones; lo recalcula finished_feed_service
    cost_per_kg: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    compositions: Mapped[List["FeedComposition"]] = relationship(
        back_populates="finished_feed",
        cascade="all, delete-orphan",
    )
    consumptions: Mapped[List["FeedConsumption"]] = relationship(
        back_populates="finished_feed",
    )

    def __repr__(self) -> str:
        return f"<FinishedFeed id={self.id!r} name={self.name!r} cost_per_kg={self.cost_per_kg!r}>"
