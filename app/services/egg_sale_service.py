from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.core.logging import get_logger
from app.models.egg_sale import EggSale
from app.schemas.egg_sale import EggSaleCreate, EggSaleUpdate

logger = get_logger(module="egg_sale_service")


def create_egg_sale(db: Session, sale_in: EggSaleCreate) -> EggSale:
    db_obj = EggSale(
        **sale_in.model_dump(),
        total_price=sale_in.quantity * sale_in.price_per_egg,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Venta de huevos creada en servicio",
        egg_sale_id=db_obj.id,
        quantity=db_obj.quantity,
        total_price=db_obj.total_price,
    )

    return db_obj


def get_egg_sale(db: Session, egg_sale_id: int) -> Optional[EggSale]:
    return (
        db.query(EggSale)
        .filter(EggSale.id == egg_sale_id)
        .first()
    )


def list_egg_sales(db: Session, skip: int = 0, limit: int = 100) -> List[EggSale]:
    return (
        db.query(EggSale)
        .order_by(EggSale.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_by_date_range(db: Session, start_date: date, end_date: date) -> List[EggSale]:
    return (
        db.query(EggSale)
        .filter(EggSale.sale_date >= start_date, EggSale.sale_date <= end_date)
        .order_by(EggSale.sale_date, EggSale.id)
        .all()
    )


def get_total_revenue_by_date_range(db: Session, start_date: date, end_date: date) -> float:
    total = (
        db.query(func.sum(EggSale.total_price))
        .filter(EggSale.sale_date >= start_date, EggSale.sale_date <= end_date)
        .scalar()
    )
    return float(total or 0.0)


def update_egg_sale(db: Session, egg_sale_id: int, sale_in: EggSaleUpdate) -> EggSale:
    db_obj = get_egg_sale(db, egg_sale_id)
    if not db_obj:
        logger.warning(
            "Intento de actualización de venta inexistente en servicio",
            egg_sale_id=egg_sale_id,
        )
        raise NotFoundError("Egg sale", egg_sale_id)

    update_data = sale_in.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_obj, field, value)

    if "quantity" in update_data or "price_per_egg" in update_data:
        db_obj.total_price = db_obj.quantity * db_obj.price_per_egg

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Venta de huevos actualizada en servicio",
        egg_sale_id=egg_sale_id,
        total_price=db_obj.total_price,
    )

    return db_obj


def delete_egg_sale(db: Session, egg_sale_id: int) -> None:
    db_obj = get_egg_sale(db, egg_sale_id)
    if not db_obj:
        logger.warning(
            "Intento de borrado de venta inexistente en servicio",
            egg_sale_id=egg_sale_id,
        )
        raise NotFoundError("Egg sale", egg_sale_id)

    db.delete(db_obj)
    db.commit()

    logger.info("Venta de huevos eliminada en servicio", egg_sale_id=egg_sale_id)
