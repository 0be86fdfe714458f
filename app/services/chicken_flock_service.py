from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import EntityInUseError, FlockCountError, NotFoundError
from app.core.logging import get_logger
from app.models.chicken_flock import ChickenFlock
from app.models.egg_production import EggProduction
from app.models.feed_consumption import FeedConsumption
from app.schemas.chicken_flock import ChickenFlockCreate, ChickenFlockUpdate

logger = get_logger(module="chicken_flock_service")


def create_chicken_flock(db: Session, flock_in: ChickenFlockCreate) -> ChickenFlock:
    db_obj = ChickenFlock(
        **flock_in.model_dump(),
        current_count=flock_in.initial_count,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Lote de gallinas creado en servicio",
        flock_id=db_obj.id,
        strain=db_obj.strain,
        initial_count=db_obj.initial_count,
    )

    return db_obj


def get_chicken_flock(db: Session, flock_id: int) -> Optional[ChickenFlock]:
    return (
        db.query(ChickenFlock)
        .filter(ChickenFlock.id == flock_id)
        .first()
    )


def list_chicken_flocks(db: Session, skip: int = 0, limit: int = 100) -> List[ChickenFlock]:
    return (
        db.query(ChickenFlock)
        .order_by(ChickenFlock.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def update_chicken_flock(
    db: Session,
    flock_id: int,
    flock_in: ChickenFlockUpdate,
) -> ChickenFlock:
    db_obj = get_chicken_flock(db, flock_id)
    if not db_obj:
        logger.warning(
            "Intento de actualización de lote inexistente en servicio",
            flock_id=flock_id,
        )
        raise NotFoundError("Chicken flock", flock_id)

    update_data = flock_in.model_dump(exclude_unset=True, exclude_none=True)

    # La mortalidad (initial - current) no puede ser negativa
    initial_count = update_data.get("initial_count", db_obj.initial_count)
    current_count = update_data.get("current_count", db_obj.current_count)
    if current_count > initial_count:
        logger.warning(
            "Recuento de lote por encima del inicial",
            flock_id=flock_id,
            current_count=current_count,
            initial_count=initial_count,
        )
        raise FlockCountError(current_count, initial_count)

    for field, value in update_data.items():
        setattr(db_obj, field, value)

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Lote de gallinas actualizado en servicio",
        flock_id=flock_id,
        current_count=db_obj.current_count,
    )

    return db_obj


def delete_chicken_flock(db: Session, flock_id: int) -> None:
    db_obj = get_chicken_flock(db, flock_id)
    if not db_obj:
        logger.warning(
            "Intento de borrado de lote inexistente en servicio",
            flock_id=flock_id,
        )
        raise NotFoundError("Chicken flock", flock_id)

    consumptions = db.query(FeedConsumption).filter(FeedConsumption.flock_id == flock_id).count()
    productions = db.query(EggProduction).filter(EggProduction.flock_id == flock_id).count()
    if consumptions or productions:
        logger.warning(
            "Intento de borrado de lote con registros asociados",
            flock_id=flock_id,
            consumptions=consumptions,
            productions=productions,
        )
        raise EntityInUseError(
            "Chicken flock",
            flock_id,
            f"{consumptions} feed consumption(s) and {productions} egg production(s)",
        )

    db.delete(db_obj)
    db.commit()

    logger.info("Lote de gallinas eliminado en servicio", flock_id=flock_id)
