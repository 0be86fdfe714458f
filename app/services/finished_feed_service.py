from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import EntityInUseError, NotFoundError
from app.core.logging import get_logger
from app.models.feed_composition import FeedComposition
from app.models.feed_consumption import FeedConsumption
from app.models.finished_feed import FinishedFeed
from app.models.raw_material import RawMaterial
from app.schemas.finished_feed import FinishedFeedCreate, FinishedFeedUpdate

logger = get_logger(module="finished_feed_service")


def create_finished_feed(db: Session, feed_in: FinishedFeedCreate) -> FinishedFeed:
    db_obj = FinishedFeed(
        **feed_in.model_dump(),
        cost_per_kg=0.0,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Pienso creado en servicio",
        finished_feed_id=db_obj.id,
        name=db_obj.name,
    )

    return db_obj


def get_finished_feed(db: Session, finished_feed_id: int) -> Optional[FinishedFeed]:
    return (
        db.query(FinishedFeed)
        .filter(FinishedFeed.id == finished_feed_id)
        .first()
    )


def list_finished_feeds(db: Session, skip: int = 0, limit: int = 100) -> List[FinishedFeed]:
    return (
        db.query(FinishedFeed)
        .order_by(FinishedFeed.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def update_finished_feed(
    db: Session,
    finished_feed_id: int,
    feed_in: FinishedFeedUpdate,
) -> FinishedFeed:
    db_obj = get_finished_feed(db, finished_feed_id)
    if not db_obj:
        logger.warning(
            "Intento de actualización de pienso inexistente en servicio",
            finished_feed_id=finished_feed_id,
        )
        raise NotFoundError("Finished feed", finished_feed_id)

    update_data = feed_in.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_obj, field, value)

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info("Pienso actualizado en servicio", finished_feed_id=finished_feed_id)

    return db_obj


def delete_finished_feed(db: Session, finished_feed_id: int) -> None:
    """Borra el pienso y sus composiciones. Falla si hay consumos que lo usan."""
    db_obj = get_finished_feed(db, finished_feed_id)
    if not db_obj:
        logger.warning(
            "Intento de borrado de pienso inexistente en servicio",
            finished_feed_id=finished_feed_id,
        )
        raise NotFoundError("Finished feed", finished_feed_id)

    consumptions = (
        db.query(FeedConsumption)
        .filter(FeedConsumption.finished_feed_id == finished_feed_id)
        .count()
    )
    if consumptions:
        logger.warning(
            "Intento de borrado de pienso con consumos registrados",
            finished_feed_id=finished_feed_id,
            consumptions=consumptions,
        )
        raise EntityInUseError(
            "Finished feed", finished_feed_id, f"{consumptions} feed consumption(s)"
        )

    db.delete(db_obj)
    db.commit()

    logger.info("Pienso eliminado en servicio", finished_feed_id=finished_feed_id)


# ---- coste por kg derivado de las composiciones ----

def calculate_feed_cost(db: Session, finished_feed_id: int) -> float:
    """
    Coste por kg de un pienso:

        sum(percentage / 100 * price_per_kg)

    sobre todas sus composiciones. Sin composiciones el coste es 0. No se
    normaliza: si los porcentajes no suman 100 el resultado tampoco.
    """
    rows = (
        db.query(FeedComposition.percentage, RawMaterial.price_per_kg)
        .join(RawMaterial, FeedComposition.raw_material_id == RawMaterial.id)
        .filter(FeedComposition.finished_feed_id == finished_feed_id)
        .all()
    )
    return sum(
        ((percentage / 100) * price_per_kg for percentage, price_per_kg in rows),
        0.0,
    )


def update_feed_cost(db: Session, finished_feed_id: int) -> float:
    """Recalcula cost_per_kg y lo guarda en el pienso."""
    db_obj = get_finished_feed(db, finished_feed_id)
    if not db_obj:
        logger.warning(
            "Intento de recálculo de coste de pienso inexistente",
            finished_feed_id=finished_feed_id,
        )
        raise NotFoundError("Finished feed", finished_feed_id)

    cost = calculate_feed_cost(db, finished_feed_id)
    db_obj.cost_per_kg = cost

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Coste de pienso recalculado",
        finished_feed_id=finished_feed_id,
        cost_per_kg=cost,
    )

    return cost
