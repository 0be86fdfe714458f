from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class RawMaterial(Base):
    __tablename__ = "raw_feed_materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    price_per_kg: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    compositions: Mapped[List["FeedComposition"]] = relationship(
        back_populates="raw_material",
    )

    def __repr__(self) -> str:
        return f"<RawMaterial id={self.id!r} name={self.name!r}>"
