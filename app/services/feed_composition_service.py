"""
Composiciones de pienso (pienso, materia prima, porcentaje).

Cada alta, cambio o baja recalcula el cost_per_kg del pienso afectado. La
escritura de la composición y el recálculo son dos commits distintos.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import DuplicateCompositionError, ForeignKeyMissingError, NotFoundError
from app.core.logging import get_logger
from app.models.feed_composition import FeedComposition
from app.schemas.feed_composition import FeedCompositionCreate, FeedCompositionUpdate
from app.services import finished_feed_service, raw_material_service

logger = get_logger(module="feed_composition_service")


def create_feed_composition(
    db: Session,
    composition_in: FeedCompositionCreate,
) -> FeedComposition:
    if not finished_feed_service.get_finished_feed(db, composition_in.finished_feed_id):
        logger.warning(
            "Composición para pienso inexistente",
            finished_feed_id=composition_in.finished_feed_id,
        )
        raise ForeignKeyMissingError("Finished feed", composition_in.finished_feed_id)

    if not raw_material_service.get_raw_material(db, composition_in.raw_material_id):
        logger.warning(
            "Composición con materia prima inexistente",
            raw_material_id=composition_in.raw_material_id,
        )
        raise ForeignKeyMissingError("Raw material", composition_in.raw_material_id)

    existing = (
        db.query(FeedComposition)
        .filter(
            FeedComposition.finished_feed_id == composition_in.finished_feed_id,
            FeedComposition.raw_material_id == composition_in.raw_material_id,
        )
        .first()
    )
    if existing:
        logger.warning(
            "Composición duplicada",
            finished_feed_id=composition_in.finished_feed_id,
            raw_material_id=composition_in.raw_material_id,
        )
        raise DuplicateCompositionError(
            composition_in.finished_feed_id, composition_in.raw_material_id
        )

    db_obj = FeedComposition(**composition_in.model_dump())
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Composición creada en servicio",
        feed_composition_id=db_obj.id,
        finished_feed_id=db_obj.finished_feed_id,
        raw_material_id=db_obj.raw_material_id,
        percentage=db_obj.percentage,
    )

    finished_feed_service.update_feed_cost(db, db_obj.finished_feed_id)
    db.refresh(db_obj)

    return db_obj


def get_feed_composition(db: Session, feed_composition_id: int) -> Optional[FeedComposition]:
    return (
        db.query(FeedComposition)
        .filter(FeedComposition.id == feed_composition_id)
        .first()
    )


def list_feed_compositions(db: Session, skip: int = 0, limit: int = 100) -> List[FeedComposition]:
    return (
        db.query(FeedComposition)
        .order_by(FeedComposition.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_by_finished_feed(db: Session, finished_feed_id: int) -> List[FeedComposition]:
    return (
        db.query(FeedComposition)
        .filter(FeedComposition.finished_feed_id == finished_feed_id)
        .order_by(FeedComposition.id)
        .all()
    )


def update_feed_composition(
    db: Session,
    feed_composition_id: int,
    composition_in: FeedCompositionUpdate,
) -> FeedComposition:
    db_obj = get_feed_composition(db, feed_composition_id)
    if not db_obj:
        logger.warning(
            "Intento de actualización de composición inexistente en servicio",
            feed_composition_id=feed_composition_id,
        )
        raise NotFoundError("Feed composition", feed_composition_id)

    update_data = composition_in.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_obj, field, value)

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Composición actualizada en servicio",
        feed_composition_id=feed_composition_id,
        percentage=db_obj.percentage,
    )

    finished_feed_service.update_feed_cost(db, db_obj.finished_feed_id)
    db.refresh(db_obj)

    return db_obj


def delete_feed_composition(db: Session, feed_composition_id: int) -> None:
    db_obj = get_feed_composition(db, feed_composition_id)
    if not db_obj:
        logger.warning(
            "Intento de borrado de composición inexistente en servicio",
            feed_composition_id=feed_composition_id,
        )
        raise NotFoundError("Feed composition", feed_composition_id)

    finished_feed_id = db_obj.finished_feed_id

    db.delete(db_obj)
    db.commit()

    logger.info(
        "Composición eliminada en servicio",
        feed_composition_id=feed_composition_id,
        finished_feed_id=finished_feed_id,
    )

    finished_feed_service.update_feed_cost(db, finished_feed_id)
