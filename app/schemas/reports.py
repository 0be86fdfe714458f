from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


# ---------- Totales por rango de fechas ----------

class DateRangeTotal(BaseModel):
    start_date: date
    end_date: date
    total: float


# ---------- Informe de beneficios ----------

class ProfitReport(BaseModel):
    total_revenue: float
    total_feed_cost: float
    total_other_expenses: float
    total_profit: float
    period_start: date
    period_end: date


# ---------- Exportaciones ----------

class ExportFormat(str, Enum):
    pdf = "pdf"      # en realidad texto plano
    excel = "excel"  # en realidad CSV


class ExportRequest(BaseModel):
    format: ExportFormat
    # str y no enum: un tipo desconocido lo rechaza export_service
    entity_type: str
    filters: Optional[Dict[str, Any]] = None


class ProfitReportExportRequest(BaseModel):
    format: ExportFormat
    start_date: date
    end_date: date
