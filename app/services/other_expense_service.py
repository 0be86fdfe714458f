from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.core.logging import get_logger
from app.models.other_expense import OtherExpense
from app.schemas.other_expense import OtherExpenseCreate, OtherExpenseUpdate

logger = get_logger(module="other_expense_service")


def create_other_expense(db: Session, expense_in: OtherExpenseCreate) -> OtherExpense:
    db_obj = OtherExpense(**expense_in.model_dump())
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info(
        "Gasto creado en servicio",
        other_expense_id=db_obj.id,
        expense_type=db_obj.expense_type.value,
        amount=db_obj.amount,
    )

    return db_obj


def get_other_expense(db: Session, other_expense_id: int) -> Optional[OtherExpense]:
    return (
        db.query(OtherExpense)
        .filter(OtherExpense.id == other_expense_id)
        .first()
    )


def list_other_expenses(db: Session, skip: int = 0, limit: int = 100) -> List[OtherExpense]:
    return (
        db.query(OtherExpense)
        .order_by(OtherExpense.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_by_date_range(db: Session, start_date: date, end_date: date) -> List[OtherExpense]:
    return (
        db.query(OtherExpense)
        .filter(OtherExpense.expense_date >= start_date, OtherExpense.expense_date <= end_date)
        .order_by(OtherExpense.expense_date, OtherExpense.id)
        .all()
    )


def get_total_by_date_range(db: Session, start_date: date, end_date: date) -> float:
    total = (
        db.query(func.sum(OtherExpense.amount))
        .filter(OtherExpense.expense_date >= start_date, OtherExpense.expense_date <= end_date)
        .scalar()
    )
    return float(total or 0.0)


def update_other_expense(
    db: Session,
    other_expense_id: int,
    expense_in: OtherExpenseUpdate,
) -> OtherExpense:
    db_obj = get_other_expense(db, other_expense_id)
    if not db_obj:
        logger.warning(
            "Intento de actualización de gasto inexistente en servicio",
            other_expense_id=other_expense_id,
        )
        raise NotFoundError("Other expense", other_expense_id)

    update_data = expense_in.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_obj, field, value)

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info("Gasto actualizado en servicio", other_expense_id=other_expense_id)

    return db_obj


def delete_other_expense(db: Session, other_expense_id: int) -> None:
    db_obj = get_other_expense(db, other_expense_id)
    if not db_obj:
        logger.warning(
            "Intento de borrado de gasto inexistente en servicio",
            other_expense_id=other_expense_id,
        )
        raise NotFoundError("Other expense", other_expense_id)

    db.delete(db_obj)
    db.commit()

    logger.info("Gasto eliminado en servicio", other_expense_id=other_expense_id)
