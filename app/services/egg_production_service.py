from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import ForeignKeyMissingError, NotFoundError
from app.core.logging import get_logger
from app.models.egg_production import EggProduction
from app.schemas.egg_production import EggProductionCreate, EggProductionUpdate
from app.services import chicken_flock_service

logger = get_logger(module="egg_production_service")


def _check_flock(db: Session, flock_id: int) -> None:
    if not chicken_flock_service.get_chicken_flock(db, flock_id):
        logger.warning("Producción para lote inexistente", flock_id=flock_id)
        raise ForeignKeyMissingError("Flock", flock_id)


def create_egg_production(
    db: Session,
    production_in: EggProductionCreate,
) -> EggProduction:
    _check_flock(db, production_in.flock_id)

    db_obj = EggProduction(**production_in.model_dump())
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Producción de huevos creada en servicio",
        egg_production_id=db_obj.id,
        flock_id=db_obj.flock_id,
        quality=db_obj.quality.value,
        quantity=db_obj.quantity,
    )

    return db_obj


def get_egg_production(db: Session, egg_production_id: int) -> Optional[EggProduction]:
    return (
        db.query(EggProduction)
        .filter(EggProduction.id == egg_production_id)
        .first()
    )


def list_egg_productions(db: Session, skip: int = 0, limit: int = 100) -> List[EggProduction]:
    return (
        db.query(EggProduction)
        .order_by(EggProduction.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_by_flock(db: Session, flock_id: int) -> List[EggProduction]:
    return (
        db.query(EggProduction)
        .filter(EggProduction.flock_id == flock_id)
        .order_by(EggProduction.production_date, EggProduction.id)
        .all()
    )


def list_by_date_range(db: Session, start_date: date, end_date: date) -> List[EggProduction]:
    return (
        db.query(EggProduction)
        .filter(
            EggProduction.production_date >= start_date,
            EggProduction.production_date <= end_date,
        )
        .order_by(EggProduction.production_date, EggProduction.id)
        .all()
    )


def update_egg_production(
    db: Session,
    egg_production_id: int,
    production_in: EggProductionUpdate,
) -> EggProduction:
    db_obj = get_egg_production(db, egg_production_id)
    if not db_obj:
        logger.warning(
            "Intento de actualización de producción inexistente en servicio",
            egg_production_id=egg_production_id,
        )
        raise NotFoundError("Egg production", egg_production_id)

    update_data = production_in.model_dump(exclude_unset=True, exclude_none=True)
    if "flock_id" in update_data:
        _check_flock(db, update_data["flock_id"])

    for field, value in update_data.items():
        setattr(db_obj, field, value)

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info("Producción de huevos actualizada en servicio", egg_production_id=egg_production_id)

    return db_obj


def delete_egg_production(db: Session, egg_production_id: int) -> None:
    db_obj = get_egg_production(db, egg_production_id)
    if not db_obj:
        logger.warning(
            "Intento de borrado de producción inexistente en servicio",
            egg_production_id=egg_production_id,
        )
        raise NotFoundError("Egg production", egg_production_id)

    db.delete(db_obj)
    db.commit()

    logger.info("Producción de huevos eliminada en servicio", egg_production_id=egg_production_id)
