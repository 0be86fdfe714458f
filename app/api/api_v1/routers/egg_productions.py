from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.api_v1.params import Limit, RowId, Skip
from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.egg_production import (
    EggProductionCreate,
    EggProductionUpdate,
    EggProductionRead,
)
from app.services import egg_production_service

router = APIRouter(prefix="/egg-productions", tags=["egg-productions"])
logger = get_logger(module="egg_productions")


@router.get("/", response_model=List[EggProductionRead])
def list_egg_productions(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
):
    objs = egg_production_service.list_egg_productions(db=db, skip=skip, limit=limit)

    logger.info(
        "Listando producciones de huevos",
        skip=skip,
        limit=limit,
        count=len(objs),
    )

    return objs


@router.get("/by-flock/{flock_id}", response_model=List[EggProductionRead])
def list_by_flock(
    flock_id: RowId,
    db: Session = Depends(get_db),
):
    objs = egg_production_service.list_by_flock(db=db, flock_id=flock_id)
    logger.info("Listando producción de lote", flock_id=flock_id, count=len(objs))
    return objs


@router.get("/by-date-range", response_model=List[EggProductionRead])
def list_by_date_range(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
):
    objs = egg_production_service.list_by_date_range(
        db=db,
        start_date=start_date,
        end_date=end_date,
    )

    logger.info(
        "Listando producción por fechas",
        start_date=str(start_date),
        end_date=str(end_date),
        count=len(objs),
    )

    return objs


@router.get("/{egg_production_id}", response_model=EggProductionRead)
def get_egg_production(
    egg_production_id: RowId,
    db: Session = Depends(get_db),
):
    obj = egg_production_service.get_egg_production(
        db=db,
        egg_production_id=egg_production_id,
    )
    if not obj:
        logger.warning("Producción no encontrada", egg_production_id=egg_production_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Egg production with id {egg_production_id} not found",
        )

    logger.info("Producción recuperada", egg_production_id=egg_production_id)
    return obj


@router.post(
    "/",
    response_model=EggProductionRead,
    status_code=status.HTTP_201_CREATED,
)
def create_egg_production(
    production_in: EggProductionCreate,
    db: Session = Depends(get_db),
):
    try:
        obj = egg_production_service.create_egg_production(
            db=db,
            production_in=production_in,
        )
    except AppError as exc:
        logger.warning(
            "Alta de producción rechazada",
            flock_id=production_in.flock_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info(
        "Producción creada",
        egg_production_id=obj.id,
        quantity=obj.quantity,
    )

    return obj


@router.patch("/{egg_production_id}", response_model=EggProductionRead)
def update_egg_production(
    egg_production_id: RowId,
    production_in: EggProductionUpdate,
    db: Session = Depends(get_db),
):
    try:
        obj = egg_production_service.update_egg_production(
            db=db,
            egg_production_id=egg_production_id,
            production_in=production_in,
        )
    except AppError as exc:
        logger.warning(
            "Actualización de producción rechazada",
            egg_production_id=egg_production_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Producción actualizada", egg_production_id=egg_production_id)

    return obj


@router.delete(
    "/{egg_production_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_egg_production(
    egg_production_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        egg_production_service.delete_egg_production(
            db=db,
            egg_production_id=egg_production_id,
        )
    except AppError as exc:
        logger.warning(
            "Borrado de producción rechazado",
            egg_production_id=egg_production_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Producción eliminada", egg_production_id=egg_production_id)
