from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.api_v1.params import Limit, RowId, Skip
from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.feed_consumption import (
    FeedConsumptionCreate,
    FeedConsumptionUpdate,
    FeedConsumptionRead,
)
from app.schemas.reports import DateRangeTotal
from app.services import feed_consumption_service

router = APIRouter(prefix="/feed-consumptions", tags=["feed-consumptions"])
logger = get_logger(module="feed_consumptions")


@router.get("/", response_model=List[FeedConsumptionRead])
def list_feed_consumptions(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
):
    objs = feed_consumption_service.list_feed_consumptions(db=db, skip=skip, limit=limit)

    logger.info(
        "Listando consumos de pienso",
        skip=skip,
        limit=limit,
        count=len(objs),
    )

    return objs


@router.get("/by-flock/{flock_id}", response_model=List[FeedConsumptionRead])
def list_by_flock(
    flock_id: RowId,
    db: Session = Depends(get_db),
):
    objs = feed_consumption_service.list_by_flock(db=db, flock_id=flock_id)
    logger.info("Listando consumos de lote", flock_id=flock_id, count=len(objs))
    return objs


@router.get("/by-date-range", response_model=List[FeedConsumptionRead])
def list_by_date_range(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
):
    objs = feed_consumption_service.list_by_date_range(
        db=db,
        start_date=start_date,
        end_date=end_date,
    )

    logger.info(
        "Listando consumos por fechas",
        start_date=str(start_date),
        end_date=str(end_date),
        count=len(objs),
    )

    return objs


@router.get("/total-cost", response_model=DateRangeTotal)
def get_total_cost(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
):
    total = feed_consumption_service.get_total_cost_by_date_range(
        db=db,
        start_date=start_date,
        end_date=end_date,
    )

    logger.info(
        "Coste total de pienso calculado",
        start_date=str(start_date),
        end_date=str(end_date),
        total=total,
    )

    return DateRangeTotal(start_date=start_date, end_date=end_date, total=total)


@router.get("/{feed_consumption_id}", response_model=FeedConsumptionRead)
def get_feed_consumption(
    feed_consumption_id: RowId,
    db: Session = Depends(get_db),
):
    obj = feed_consumption_service.get_feed_consumption(
        db=db,
        feed_consumption_id=feed_consumption_id,
    )
    if not obj:
        logger.warning("Consumo no encontrado", feed_consumption_id=feed_consumption_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feed consumption with id {feed_consumption_id} not found",
        )

    logger.info("Consumo recuperado", feed_consumption_id=feed_consumption_id)
    return obj


@router.post(
    "/",
    response_model=FeedConsumptionRead,
    status_code=status.HTTP_201_CREATED,
)
def create_feed_consumption(
    consumption_in: FeedConsumptionCreate,
    db: Session = Depends(get_db),
):
    try:
        obj = feed_consumption_service.create_feed_consumption(
            db=db,
            consumption_in=consumption_in,
        )
    except AppError as exc:
        logger.warning(
            "Alta de consumo rechazada",
            flock_id=consumption_in.flock_id,
            finished_feed_id=consumption_in.finished_feed_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info(
        "Consumo creado",
        feed_consumption_id=obj.id,
        cost=obj.cost,
    )

    return obj


@router.patch("/{feed_consumption_id}", response_model=FeedConsumptionRead)
def update_feed_consumption(
    feed_consumption_id: RowId,
    consumption_in: FeedConsumptionUpdate,
    db: Session = Depends(get_db),
):
    try:
        obj = feed_consumption_service.update_feed_consumption(
            db=db,
            feed_consumption_id=feed_consumption_id,
            consumption_in=consumption_in,
        )
    except AppError as exc:
        logger.warning(
            "Actualización de consumo rechazada",
            feed_consumption_id=feed_consumption_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Consumo actualizado", feed_consumption_id=feed_consumption_id)

    return obj


@router.delete(
    "/{feed_consumption_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_feed_consumption(
    feed_consumption_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        feed_consumption_service.delete_feed_consumption(
            db=db,
            feed_consumption_id=feed_consumption_id,
        )
    except AppError as exc:
        logger.warning(
            "Borrado de consumo rechazado",
            feed_consumption_id=feed_consumption_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Consumo eliminado", feed_consumption_id=feed_consumption_id)
