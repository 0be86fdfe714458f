from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import ForeignKeyMissingError, NotFoundError
from app.core.logging import get_logger
from app.models.feed_consumption import FeedConsumption
from app.schemas.feed_consumption import FeedConsumptionCreate, FeedConsumptionUpdate
from app.services import chicken_flock_service, finished_feed_service

logger = get_logger(module="feed_consumption_service")


def _check_flock(db: Session, flock_id: int) -> None:
    if not chicken_flock_service.get_chicken_flock(db, flock_id):
        logger.warning("Consumo para lote inexistente", flock_id=flock_id)
        raise ForeignKeyMissingError("Flock", flock_id)


def _get_feed_or_raise(db: Session, finished_feed_id: int):
    feed = finished_feed_service.get_finished_feed(db, finished_feed_id)
    if not feed:
        logger.warning("Consumo de pienso inexistente", finished_feed_id=finished_feed_id)
        raise ForeignKeyMissingError("Finished feed", finished_feed_id)
    return feed


def create_feed_consumption(
    db: Session,
    consumption_in: FeedConsumptionCreate,
) -> FeedConsumption:
    _check_flock(db, consumption_in.flock_id)
    feed = _get_feed_or_raise(db, consumption_in.finished_feed_id)

    db_obj = FeedConsumption(
        **consumption_in.model_dump(),
        cost=consumption_in.quantity_kg * feed.cost_per_kg,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Consumo de pienso creado en servicio",
        feed_consumption_id=db_obj.id,
        flock_id=db_obj.flock_id,
        quantity_kg=db_obj.quantity_kg,
        cost=db_obj.cost,
    )

    return db_obj


def get_feed_consumption(db: Session, feed_consumption_id: int) -> Optional[FeedConsumption]:
    return (
        db.query(FeedConsumption)
        .filter(FeedConsumption.id == feed_consumption_id)
        .first()
    )


def list_feed_consumptions(db: Session, skip: int = 0, limit: int = 100) -> List[FeedConsumption]:
    return (
        db.query(FeedConsumption)
        .order_by(FeedConsumption.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_by_flock(db: Session, flock_id: int) -> List[FeedConsumption]:
    return (
        db.query(FeedConsumption)
        .filter(FeedConsumption.flock_id == flock_id)
        .order_by(FeedConsumption.consumption_date, FeedConsumption.id)
        .all()
    )


def list_by_date_range(db: Session, start_date: date, end_date: date) -> List[FeedConsumption]:
    return (
        db.query(FeedConsumption)
        .filter(
            FeedConsumption.consumption_date >= start_date,
            FeedConsumption.consumption_date <= end_date,
        )
        .order_by(FeedConsumption.consumption_date, FeedConsumption.id)
        .all()
    )


def get_total_cost_by_date_range(db: Session, start_date: date, end_date: date) -> float:
    total = (
        db.query(func.sum(FeedConsumption.cost))
        .filter(
            FeedConsumption.consumption_date >= start_date,
            FeedConsumption.consumption_date <= end_date,
        )
        .scalar()
    )
    return float(total or 0.0)


def update_feed_consumption(
    db: Session,
    feed_consumption_id: int,
    consumption_in: FeedConsumptionUpdate,
) -> FeedConsumption:
    db_obj = get_feed_consumption(db, feed_consumption_id)
    if not db_obj:
        logger.warning(
            "Intento de actualización de consumo inexistente en servicio",
            feed_consumption_id=feed_consumption_id,
        )
        raise NotFoundError("Feed consumption", feed_consumption_id)

    update_data = consumption_in.model_dump(exclude_unset=True, exclude_none=True)

    if "flock_id" in update_data:
        _check_flock(db, update_data["flock_id"])

    if "quantity_kg" in update_data or "finished_feed_id" in update_data:
        # El coste se recalcula con el cost_per_kg actual del pienso
        feed = _get_feed_or_raise(
            db, update_data.get("finished_feed_id", db_obj.finished_feed_id)
        )
        quantity_kg = update_data.get("quantity_kg", db_obj.quantity_kg)
        update_data["cost"] = quantity_kg * feed.cost_per_kg

    for field, value in update_data.items():
        setattr(db_obj, field, value)

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Consumo de pienso actualizado en servicio",
        feed_consumption_id=feed_consumption_id,
        cost=db_obj.cost,
    )

    return db_obj


def delete_feed_consumption(db: Session, feed_consumption_id: int) -> None:
    db_obj = get_feed_consumption(db, feed_consumption_id)
    if not db_obj:
        logger.warning(
            "Intento de borrado de consumo inexistente en servicio",
            feed_consumption_id=feed_consumption_id,
        )
        raise NotFoundError("Feed consumption", feed_consumption_id)

    db.delete(db_obj)
    db.commit()

    logger.info("Consumo de pienso eliminado en servicio", feed_consumption_id=feed_consumption_id)
