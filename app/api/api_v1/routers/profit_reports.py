from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.db import get_db
from app.schemas.reports import ProfitReport
from app.services import profit_report_service

router = APIRouter(prefix="/profit-reports", tags=["profit-reports"])
logger = get_logger(module="profit_reports")


@router.get("/", response_model=ProfitReport)
def generate_profit_report(
    period_start: date,
    period_end: date,
    db: Session = Depends(get_db),
):
    report = profit_report_service.generate_profit_report(
        db=db,
        period_start=period_start,
        period_end=period_end,
    )

    logger.info(
        "Informe de beneficios servido",
        period_start=str(period_start),
        period_end=str(period_end),
    )

    return report
