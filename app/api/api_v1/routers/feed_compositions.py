from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.api_v1.params import Limit, RowId, Skip
from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.feed_composition import (
    FeedCompositionCreate,
    FeedCompositionUpdate,
    FeedCompositionRead,
)
from app.services import feed_composition_service

router = APIRouter(prefix="/feed-compositions", tags=["feed-compositions"])
logger = get_logger(module="feed_compositions")


@router.get("/", response_model=List[FeedCompositionRead])
def list_feed_compositions(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
):
    objs = feed_composition_service.list_feed_compositions(db=db, skip=skip, limit=limit)

    logger.info(
        "Listando composiciones",
        skip=skip,
        limit=limit,
        count=len(objs),
    )

    return objs


@router.get("/by-finished-feed/{finished_feed_id}", response_model=List[FeedCompositionRead])
def list_by_finished_feed(
    finished_feed_id: RowId,
    db: Session = Depends(get_db),
):
    objs = feed_composition_service.list_by_finished_feed(db=db, finished_feed_id=finished_feed_id)

    logger.info(
        "Listando composiciones de pienso",
        finished_feed_id=finished_feed_id,
        count=len(objs),
    )

    return objs


@router.get("/{feed_composition_id}", response_model=FeedCompositionRead)
def get_feed_composition(
    feed_composition_id: RowId,
    db: Session = Depends(get_db),
):
    obj = feed_composition_service.get_feed_composition(
        db=db,
        feed_composition_id=feed_composition_id,
    )
    if not obj:
        logger.warning("Composición no encontrada", feed_composition_id=feed_composition_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feed composition with id {feed_composition_id} not found",
        )

    logger.info("Composición recuperada", feed_composition_id=feed_composition_id)
    return obj


@router.post(
    "/",
    response_model=FeedCompositionRead,
    status_code=status.HTTP_201_CREATED,
)
def create_feed_composition(
    composition_in: FeedCompositionCreate,
    db: Session = Depends(get_db),
):
    try:
        obj = feed_composition_service.create_feed_composition(
            db=db,
            composition_in=composition_in,
        )
    except AppError as exc:
        logger.warning(
            "Alta de composición rechazada",
            finished_feed_id=composition_in.finished_feed_id,
            raw_material_id=composition_in.raw_material_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info(
        "Composición creada",
        feed_composition_id=obj.id,
        finished_feed_id=obj.finished_feed_id,
    )

    return obj


@router.patch("/{feed_composition_id}", response_model=FeedCompositionRead)
def update_feed_composition(
    feed_composition_id: RowId,
    composition_in: FeedCompositionUpdate,
    db: Session = Depends(get_db),
):
    try:
        obj = feed_composition_service.update_feed_composition(
            db=db,
            feed_composition_id=feed_composition_id,
            composition_in=composition_in,
        )
    except AppError as exc:
        logger.warning(
            "Actualización de composición rechazada",
            feed_composition_id=feed_composition_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Composición actualizada", feed_composition_id=feed_composition_id)

    return obj


@router.delete(
    "/{feed_composition_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_feed_composition(
    feed_composition_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        feed_composition_service.delete_feed_composition(
            db=db,
            feed_composition_id=feed_composition_id,
        )
    except AppError as exc:
        logger.warning(
            "Borrado de composición rechazado",
            feed_composition_id=feed_composition_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Composición eliminada", feed_composition_id=feed_composition_id)
