from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import EntityInUseError, NotFoundError
from app.core.logging import get_logger
from app.models.feed_composition import FeedComposition
from app.models.raw_material import RawMaterial
from app.schemas.raw_material import RawMaterialCreate, RawMaterialUpdate
from app.services import finished_feed_service

logger = get_logger(module="raw_material_service")


def create_raw_material(db: Session, material_in: RawMaterialCreate) -> RawMaterial:
    db_obj = RawMaterial(**material_in.model_dump())
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Materia prima creada en servicio",
        raw_material_id=db_obj.id,
        name=db_obj.name,
        price_per_kg=db_obj.price_per_kg,
    )

    return db_obj


def get_raw_material(db: Session, raw_material_id: int) -> Optional[RawMaterial]:
    return (
        db.query(RawMaterial)
        .filter(RawMaterial.id == raw_material_id)
        .first()
    )


def list_raw_materials(db: Session, skip: int = 0, limit: int = 100) -> List[RawMaterial]:
    return (
        db.query(RawMaterial)
        .order_by(RawMaterial.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def update_raw_material(
    db: Session,
    raw_material_id: int,
    material_in: RawMaterialUpdate,
) -> RawMaterial:
    db_obj = get_raw_material(db, raw_material_id)
    if not db_obj:
        logger.warning(
            "Intento de actualización de materia prima inexistente en servicio",
            raw_material_id=raw_material_id,
        )
        raise NotFoundError("Raw material", raw_material_id)

    update_data = material_in.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_obj, field, value)

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info("Materia prima actualizada en servicio", raw_material_id=raw_material_id)

    if "price_per_kg" in update_data:
        # Los piensos que la usan tienen que reflejar el nuevo precio
        feed_ids = [
            feed_id
            for (feed_id,) in (
                db.query(FeedComposition.finished_feed_id)
                .filter(FeedComposition.raw_material_id == raw_material_id)
                .distinct()
                .all()
            )
        ]
        for feed_id in feed_ids:
            finished_feed_service.update_feed_cost(db, feed_id)

    return db_obj


def delete_raw_material(db: Session, raw_material_id: int) -> None:
    db_obj = get_raw_material(db, raw_material_id)
    if not db_obj:
        logger.warning(
            "Intento de borrado de materia prima inexistente en servicio",
            raw_material_id=raw_material_id,
        )
        raise NotFoundError("Raw material", raw_material_id)

    compositions = (
        db.query(FeedComposition)
        .filter(FeedComposition.raw_material_id == raw_material_id)
        .count()
    )
    if compositions:
        logger.warning(
            "Intento de borrado de materia prima usada en composiciones",
            raw_material_id=raw_material_id,
            compositions=compositions,
        )
        raise EntityInUseError(
            "Raw material", raw_material_id, f"{compositions} feed composition(s)"
        )

    db.delete(db_obj)
    db.commit()

    logger.info("Materia prima eliminada en servicio", raw_material_id=raw_material_id)
