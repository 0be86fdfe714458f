from datetime import date

from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.schemas.reports import ProfitReport
from app.services import egg_sale_service, feed_consumption_service, other_expense_service

logger = get_logger(module="profit_report_service")


def calculate_total_revenue(db: Session, start_date: date, end_date: date) -> float:
    return egg_sale_service.get_total_revenue_by_date_range(db, start_date, end_date)


def calculate_total_feed_cost(db: Session, start_date: date, end_date: date) -> float:
    return feed_consumption_service.get_total_cost_by_date_range(db, start_date, end_date)


def calculate_total_other_expenses(db: Session, start_date: date, end_date: date) -> float:
    return other_expense_service.get_total_by_date_range(db, start_date, end_date)


def generate_profit_report(db: Session, period_start: date, period_end: date) -> ProfitReport:
    """
    Beneficio del periodo (ambos extremos incluidos):

        ventas de huevos - coste de pienso consumido - otros gastos
    """
    total_revenue = calculate_total_revenue(db, period_start, period_end)
    total_feed_cost = calculate_total_feed_cost(db, period_start, period_end)
    total_other_expenses = calculate_total_other_expenses(db, period_start, period_end)

    report = ProfitReport(
        total_revenue=total_revenue,
        total_feed_cost=total_feed_cost,
        total_other_expenses=total_other_expenses,
        total_profit=total_revenue - total_feed_cost - total_other_expenses,
        period_start=period_start,
        period_end=period_end,
    )

    logger.info(
        "Informe de beneficios generado",
        period_start=str(period_start),
        period_end=str(period_end),
        total_profit=report.total_profit,
    )

    return report
