from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class FeedComposition(Base):
    __tablename__ = "feed_compositions"
    __table_args__ = (
        UniqueConstraint("finished_feed_id", "raw_material_id", name="uq_feed_material"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    finished_feed_id: Mapped[int] = mapped_column(
        ForeignKey("finished_feeds.id"), nullable=False, index=True
    )
    raw_material_id: Mapped[int] = mapped_column(
        ForeignKey("raw_feed_materials.id"), nullable=False, index=True
    )
    # 0-100; no se valida que la suma de un pienso sea 100
    percentage: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    finished_feed: Mapped["FinishedFeed"] = relationship(back_populates="compositions")
    raw_material: Mapped["RawMaterial"] = relationship(back_populates="compositions")

    def __repr__(self) -> str:
        return (
            f"<FeedComposition id={self.id!r} feed={self.finished_feed_id!r} "
            f"material={self.raw_material_id!r} pct={self.percentage!r}>"
        )
