from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.api_v1.params import Limit, RowId, Skip
from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.egg_sale import (
    EggSaleCreate,
    EggSaleUpdate,
    EggSaleRead,
)
from app.schemas.reports import DateRangeTotal
from app.services import egg_sale_service

router = APIRouter(prefix="/egg-sales", tags=["egg-sales"])
logger = get_logger(module="egg_sales")


@router.get("/", response_model=List[EggSaleRead])
def list_egg_sales(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
):
    objs = egg_sale_service.list_egg_sales(db=db, skip=skip, limit=limit)

    logger.info(
        "Listando ventas de huevos",
        skip=skip,
        limit=limit,
        count=len(objs),
    )

    return objs


@router.get("/by-date-range", response_model=List[EggSaleRead])
def list_by_date_range(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
):
    objs = egg_sale_service.list_by_date_range(db=db, start_date=start_date, end_date=end_date)

    logger.info(
        "Listando ventas por fechas",
        start_date=str(start_date),
        end_date=str(end_date),
        count=len(objs),
    )

    return objs


@router.get("/total-revenue", response_model=DateRangeTotal)
def get_total_revenue(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
):
    total = egg_sale_service.get_total_revenue_by_date_range(
        db=db,
        start_date=start_date,
        end_date=end_date,
    )

    logger.info(
        "Ingresos totales calculados",
        start_date=str(start_date),
        end_date=str(end_date),
        total=total,
    )

    return DateRangeTotal(start_date=start_date, end_date=end_date, total=total)


@router.get("/{egg_sale_id}", response_model=EggSaleRead)
def get_egg_sale(
    egg_sale_id: RowId,
    db: Session = Depends(get_db),
):
    obj = egg_sale_service.get_egg_sale(db=db, egg_sale_id=egg_sale_id)
    if not obj:
        logger.warning("Venta no encontrada", egg_sale_id=egg_sale_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Egg sale with id {egg_sale_id} not found",
        )

    logger.info("Venta recuperada", egg_sale_id=egg_sale_id)
    return obj


@router.post(
    "/",
    response_model=EggSaleRead,
    status_code=status.HTTP_201_CREATED,
)
def create_egg_sale(
    sale_in: EggSaleCreate,
    db: Session = Depends(get_db),
):
    obj = egg_sale_service.create_egg_sale(db=db, sale_in=sale_in)

    logger.info(
        "Venta creada",
        egg_sale_id=obj.id,
        total_price=obj.total_price,
    )

    return obj


@router.patch("/{egg_sale_id}", response_model=EggSaleRead)
def update_egg_sale(
    egg_sale_id: RowId,
    sale_in: EggSaleUpdate,
    db: Session = Depends(get_db),
):
    try:
        obj = egg_sale_service.update_egg_sale(db=db, egg_sale_id=egg_sale_id, sale_in=sale_in)
    except AppError as exc:
        logger.warning(
            "Actualización de venta rechazada",
            egg_sale_id=egg_sale_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Venta actualizada", egg_sale_id=egg_sale_id)

    return obj


@router.delete(
    "/{egg_sale_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_egg_sale(
    egg_sale_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        egg_sale_service.delete_egg_sale(db=db, egg_sale_id=egg_sale_id)
    except AppError as exc:
        logger.warning(
            "Borrado de venta rechazado",
            egg_sale_id=egg_sale_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Venta eliminada", egg_sale_id=egg_sale_id)
