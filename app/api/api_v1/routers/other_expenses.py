from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.api_v1.params import Limit, RowId, Skip
from app.core.errors import AppError
from app.core.logging import get_logger
from app.db import get_db
from app.schemas.other_expense import (
    OtherExpenseCreate,
    OtherExpenseUpdate,
    OtherExpenseRead,
)
from app.schemas.reports import DateRangeTotal
from app.services import other_expense_service

router = APIRouter(prefix="/other-expenses", tags=["other-expenses"])
logger = get_logger(module="other_expenses")


@router.get("/", response_model=List[OtherExpenseRead])
def list_other_expenses(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
):
    objs = other_expense_service.list_other_expenses(db=db, skip=skip, limit=limit)

    logger.info(
        "Listando gastos",
        skip=skip,
        limit=limit,
        count=len(objs),
    )

    return objs


@router.get("/by-date-range", response_model=List[OtherExpenseRead])
def list_by_date_range(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
):
    objs = other_expense_service.list_by_date_range(db=db, start_date=start_date, end_date=end_date)

    logger.info(
        "Listando gastos por fechas",
        start_date=str(start_date),
        end_date=str(end_date),
        count=len(objs),
    )

    return objs


@router.get("/total", response_model=DateRangeTotal)
def get_total(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
):
    total = other_expense_service.get_total_by_date_range(
        db=db,
        start_date=start_date,
        end_date=end_date,
    )

    logger.info(
        "Total de gastos calculado",
        start_date=str(start_date),
        end_date=str(end_date),
        total=total,
    )

    return DateRangeTotal(start_date=start_date, end_date=end_date, total=total)


@router.get("/{other_expense_id}", response_model=OtherExpenseRead)
def get_other_expense(
    other_expense_id: RowId,
    db: Session = Depends(get_db),
):
    obj = other_expense_service.get_other_expense(db=db, other_expense_id=other_expense_id)
    if not obj:
        logger.warning("Gasto no encontrado", other_expense_id=other_expense_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Other expense with id {other_expense_id} not found",
        )

    logger.info("Gasto recuperado", other_expense_id=other_expense_id)
    return obj


@router.post(
    "/",
    response_model=OtherExpenseRead,
    status_code=status.HTTP_201_CREATED,
)
def create_other_expense(
    expense_in: OtherExpenseCreate,
    db: Session = Depends(get_db),
):
    obj = other_expense_service.create_other_expense(db=db, expense_in=expense_in)

    logger.info(
        "Gasto creado",
        other_expense_id=obj.id,
        amount=obj.amount,
    )

    return obj


@router.patch("/{other_expense_id}", response_model=OtherExpenseRead)
def update_other_expense(
    other_expense_id: RowId,
    expense_in: OtherExpenseUpdate,
    db: Session = Depends(get_db),
):
    try:
        obj = other_expense_service.update_other_expense(
            db=db,
            other_expense_id=other_expense_id,
            expense_in=expense_in,
        )
    except AppError as exc:
        logger.warning(
            "Actualización de gasto rechazada",
            other_expense_id=other_expense_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Gasto actualizado", other_expense_id=other_expense_id)

    return obj


@router.delete(
    "/{other_expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_other_expense(
    other_expense_id: RowId,
    db: Session = Depends(get_db),
):
    try:
        other_expense_service.delete_other_expense(db=db, other_expense_id=other_expense_id)
    except AppError as exc:
        logger.warning(
            "Borrado de gasto rechazado",
            other_expense_id=other_expense_id,
            error=exc.message,
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    logger.info("Gasto eliminado", other_expense_id=other_expense_id)
