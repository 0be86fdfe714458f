from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.api_v1.params import Limit, RowId, Skip
from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.chicken_flock import (
    ChickenFlockCreate,
    ChickenFlockUpdate,
    ChickenFlockRead,
)
from app.services import chicken_flock_service

router = APIRouter(prefix="/chicken-flocks", tags=["chicken-flocks"])
logger = get_logger(module="chicken_flocks")


@router.get("/", response_model=List[ChickenFlockRead])
def list_chicken_flocks(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
):
    objs = chicken_flock_service.list_chicken_flocks(db=db, skip=skip, limit=limit)

    logger.info(
        "Listando lotes",
        skip=skip,
        limit=limit,
        count=len(objs),
    )

    return objs


@router.get("/{flock_id}", response_model=ChickenFlockRead)
def get_chicken_flock(
    flock_id: RowId,
    db: Session = Depends(get_db),
):
    obj = chicken_flock_service.get_chicken_flock(db=db, flock_id=flock_id)
    if not obj:
        logger.warning("Lote no encontrado", flock_id=flock_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Chicken flock with id {flock_id} not found",
        )

    logger.info("Lote recuperado", flock_id=flock_id)
    return obj


@router.post(
    "/",
    response_model=ChickenFlockRead,
    status_code=status.HTTP_201_CREATED,
)
def create_chicken_flock(
    flock_in: ChickenFlockCreate,
    db: Session = Depends(get_db),
):
    obj = chicken_flock_service.create_chicken_flock(db=db, flock_in=flock_in)

    logger.info(
        "Lote creado",
        flock_id=obj.id,
        strain=obj.strain,
        initial_count=obj.initial_count,
    )

    return obj


@router.patch("/{flock_id}", response_model=ChickenFlockRead)
def update_chicken_flock(
    flock_id: RowId,
    flock_in: ChickenFlockUpdate,
    db: Session = Depends(get_db),
):
    try:
        obj = chicken_flock_service.update_chicken_flock(
            db=db,
            flock_id=flock_id,
            flock_in=flock_in,
        )
    except AppError as exc:
        logger.warning(
            "Actualización de lote rechazada",
            flock_id=flock_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Lote actualizado", flock_id=flock_id)

    return obj


@router.delete(
    "/{flock_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_chicken_flock(
    flock_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        chicken_flock_service.delete_chicken_flock(db=db, flock_id=flock_id)
    except AppError as exc:
        logger.warning(
            "Borrado de lote rechazado",
            flock_id=flock_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Lote eliminado", flock_id=flock_id)
