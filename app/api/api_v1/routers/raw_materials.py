from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.api_v1.params import Limit, RowId, Skip
from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.raw_material import (
    RawMaterialCreate,
    RawMaterialUpdate,
    RawMaterialRead,
)
from app.services import raw_material_service

router = APIRouter(prefix="/raw-materials", tags=["raw-materials"])
logger = get_logger(module="raw_materials")


@router.get("/", response_model=List[RawMaterialRead])
def list_raw_materials(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
):
    objs = raw_material_service.list_raw_materials(db=db, skip=skip, limit=limit)

    logger.info(
        "Listando materias primas",
        skip=skip,
        limit=limit,
        count=len(objs),
    )

    return objs


@router.get("/{raw_material_id}", response_model=RawMaterialRead)
def get_raw_material(
    raw_material_id: RowId,
    db: Session = Depends(get_db),
):
    obj = raw_material_service.get_raw_material(db=db, raw_material_id=raw_material_id)
    if not obj:
        logger.warning("Materia prima no encontrada", raw_material_id=raw_material_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Raw material with id {raw_material_id} not found",
        )

    logger.info("Materia prima recuperada", raw_material_id=raw_material_id)
    return obj


@router.post(
    "/",
    response_model=RawMaterialRead,
    status_code=status.HTTP_201_CREATED,
)
def create_raw_material(
    material_in: RawMaterialCreate,
    db: Session = Depends(get_db),
):
    obj = raw_material_service.create_raw_material(db=db, material_in=material_in)

    logger.info(
        "Materia prima creada",
        raw_material_id=obj.id,
        price_per_kg=obj.price_per_kg,
    )

    return obj


@router.patch("/{raw_material_id}", response_model=RawMaterialRead)
def update_raw_material(
    raw_material_id: RowId,
    material_in: RawMaterialUpdate,
    db: Session = Depends(get_db),
):
    try:
        obj = raw_material_service.update_raw_material(
            db=db,
            raw_material_id=raw_material_id,
            material_in=material_in,
        )
    except AppError as exc:
        logger.warning(
            "Actualización de materia prima rechazada",
            raw_material_id=raw_material_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Materia prima actualizada", raw_material_id=raw_material_id)

    return obj


@router.delete(
    "/{raw_material_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_raw_material(
    raw_material_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        raw_material_service.delete_raw_material(db=db, raw_material_id=raw_material_id)
    except AppError as exc:
        logger.warning(
            "Borrado de materia prima rechazado",
            raw_material_id=raw_material_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Materia prima eliminada", raw_material_id=raw_material_id)
