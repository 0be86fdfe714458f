from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.api_v1.params import Limit, RowId, Skip
from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.finished_feed import (
    FeedCostRead,
    FinishedFeedCreate,
    FinishedFeedUpdate,
    FinishedFeedRead,
)
from app.services import finished_feed_service

router = APIRouter(prefix="/finished-feeds", tags=["finished-feeds"])
logger = get_logger(module="finished_feeds")


@router.get("/", response_model=List[FinishedFeedRead])
def list_finished_feeds(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
):
    objs = finished_feed_service.list_finished_feeds(db=db, skip=skip, limit=limit)

    logger.info(
        "Listando piensos",
        skip=skip,
        limit=limit,
        count=len(objs),
    )

    return objs


@router.get("/{finished_feed_id}", response_model=FinishedFeedRead)
def get_finished_feed(
    finished_feed_id: RowId,
    db: Session = Depends(get_db),
):
    obj = finished_feed_service.get_finished_feed(db=db, finished_feed_id=finished_feed_id)
    if not obj:
        logger.warning("Pienso no encontrado", finished_feed_id=finished_feed_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Finished feed with id {finished_feed_id} not found",
        )

    logger.info("Pienso recuperado", finished_feed_id=finished_feed_id)
    return obj


@router.post(
    "/",
    response_model=FinishedFeedRead,
    status_code=status.HTTP_201_CREATED,
)
def create_finished_feed(
    feed_in: FinishedFeedCreate,
    db: Session = Depends(get_db),
):
    obj = finished_feed_service.create_finished_feed(db=db, feed_in=feed_in)

    logger.info("Pienso creado", finished_feed_id=obj.id, name=obj.name)

    return obj


@router.patch("/{finished_feed_id}", response_model=FinishedFeedRead)
def update_finished_feed(
    finished_feed_id: RowId,
    feed_in: FinishedFeedUpdate,
    db: Session = Depends(get_db),
):
    try:
        obj = finished_feed_service.update_finished_feed(
            db=db,
            finished_feed_id=finished_feed_id,
            feed_in=feed_in,
        )
    except AppError as exc:
        logger.warning(
            "Actualización de pienso rechazada",
            finished_feed_id=finished_feed_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Pienso actualizado", finished_feed_id=finished_feed_id)

    return obj


@router.delete(
    "/{finished_feed_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_finished_feed(
    finished_feed_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        finished_feed_service.delete_finished_feed(db=db, finished_feed_id=finished_feed_id)
    except AppError as exc:
        logger.warning(
            "Borrado de pienso rechazado",
            finished_feed_id=finished_feed_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Pienso eliminado", finished_feed_id=finished_feed_id)


@router.post("/{finished_feed_id}/calculate-cost", response_model=FeedCostRead)
def calculate_feed_cost(
    finished_feed_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        cost = finished_feed_service.update_feed_cost(db=db, finished_feed_id=finished_feed_id)
    except AppError as exc:
        logger.warning(
            "Cálculo de coste rechazado",
            finished_feed_id=finished_feed_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Coste de pienso calculado", finished_feed_id=finished_feed_id, cost_per_kg=cost)

    return FeedCostRead(finished_feed_id=finished_feed_id, cost_per_kg=cost)
