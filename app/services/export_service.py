"""
Exportación de registros a texto plano ("pdf") o CSV ("excel").

Ninguno de los dos formatos es binario: se devuelve siempre un buffer UTF-8.
"""
import csv
import io
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Query, Session

from app.core.errors import InvalidFilterError, UnsupportedEntityError
from app.core.logging import get_logger
from app.models.base import MAX_INTEGER
from app.models.chicken_flock import ChickenFlock
from app.models.egg_production import EggProduction
from app.models.egg_sale import EggSale
from app.models.enums import EggQuality, ExpenseType
from app.models.feed_consumption import FeedConsumption
from app.models.finished_feed import FinishedFeed
from app.models.other_expense import OtherExpense
from app.models.raw_material import RawMaterial
from app.schemas.reports import ExportFormat, ProfitReport
from app.services import profit_report_service

logger = get_logger(module="export_service")

MEDIA_TYPES = {
    ExportFormat.pdf: "text/plain",
    ExportFormat.excel: "text/csv",
}

FILE_EXTENSIONS = {
    ExportFormat.pdf: "txt",
    ExportFormat.excel: "csv",
}


# ---------- parseo de filtros ----------

def _has(filters: Dict[str, Any], key: str) -> bool:
    return filters.get(key) not in (None, "")


def _date_filter(filters: Dict[str, Any], key: str) -> Optional[date]:
    if not _has(filters, key):
        return None
    value = filters[key]
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise InvalidFilterError(f"Invalid filter {key}: {value!r} is not an ISO date") from exc


def _str_filter(filters: Dict[str, Any], key: str) -> Optional[str]:
    if not _has(filters, key):
        return None
    value = filters[key]
    if isinstance(value, (list, dict, tuple, set)):
        raise InvalidFilterError(f"Invalid filter {key}: {value!r} is not a string")
    return str(value)


def _int_filter(filters: Dict[str, Any], key: str) -> Optional[int]:
    if not _has(filters, key):
        return None
    try:
        value = int(filters[key])
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidFilterError(f"Invalid filter {key}: {filters[key]!r} is not an integer") from exc
    if not -MAX_INTEGER - 1 <= value <= MAX_INTEGER:
        raise InvalidFilterError(f"Invalid filter {key}: {value} is out of range")
    return value


def _float_filter(filters: Dict[str, Any], key: str) -> Optional[float]:
    if not _has(filters, key):
        return None
    try:
        return float(filters[key])
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidFilterError(f"Invalid filter {key}: {filters[key]!r} is not a number") from exc


def _enum_filter(filters: Dict[str, Any], key: str, enum_cls):
    if not _has(filters, key):
        return None
    try:
        return enum_cls(filters[key])
    except (TypeError, ValueError) as exc:
        raise InvalidFilterError(f"Invalid filter {key}: {filters[key]!r}") from exc


def _date_range(query: Query, column, filters: Dict[str, Any], from_key: str, to_key: str) -> Query:
    date_from = _date_filter(filters, from_key)
    date_to = _date_filter(filters, to_key)
    if date_from is not None:
        query = query.filter(column >= date_from)
    if date_to is not None:
        query = query.filter(column <= date_to)
    return query


# ---------- consultas por tipo de entidad ----------

def _fetch_raw_materials(db: Session, filters: Dict[str, Any]) -> List[RawMaterial]:
    query = db.query(RawMaterial)
    name = _str_filter(filters, "name")
    if name is not None:
        query = query.filter(RawMaterial.name == name)
    min_price = _float_filter(filters, "min_price")
    if min_price is not None:
        query = query.filter(RawMaterial.price_per_kg >= min_price)
    return query.order_by(RawMaterial.created_at.desc(), RawMaterial.id.desc()).all()


def _fetch_finished_feeds(db: Session, filters: Dict[str, Any]) -> List[FinishedFeed]:
    query = db.query(FinishedFeed)
    name = _str_filter(filters, "name")
    if name is not None:
        query = query.filter(FinishedFeed.name == name)
    return query.order_by(FinishedFeed.created_at.desc(), FinishedFeed.id.desc()).all()


def _fetch_flocks(db: Session, filters: Dict[str, Any]) -> List[ChickenFlock]:
    query = db.query(ChickenFlock)
    strain = _str_filter(filters, "strain")
    if strain is not None:
        query = query.filter(ChickenFlock.strain == strain)
    query = _date_range(query, ChickenFlock.entry_date, filters, "entry_date_from", "entry_date_to")
    return query.order_by(ChickenFlock.created_at.desc(), ChickenFlock.id.desc()).all()


def _fetch_feed_consumption(db: Session, filters: Dict[str, Any]) -> List[FeedConsumption]:
    query = db.query(FeedConsumption)
    flock_id = _int_filter(filters, "flock_id")
    if flock_id is not None:
        query = query.filter(FeedConsumption.flock_id == flock_id)
    query = _date_range(query, FeedConsumption.consumption_date, filters, "date_from", "date_to")
    return query.order_by(
        FeedConsumption.consumption_date.desc(), FeedConsumption.id.desc()
    ).all()


def _fetch_egg_production(db: Session, filters: Dict[str, Any]) -> List[EggProduction]:
    query = db.query(EggProduction)
    flock_id = _int_filter(filters, "flock_id")
    if flock_id is not None:
        query = query.filter(EggProduction.flock_id == flock_id)
    quality = _enum_filter(filters, "quality", EggQuality)
    if quality is not None:
        query = query.filter(EggProduction.quality == quality)
    query = _date_range(query, EggProduction.production_date, filters, "date_from", "date_to")
    return query.order_by(
        EggProduction.production_date.desc(), EggProduction.id.desc()
    ).all()


def _fetch_egg_sales(db: Session, filters: Dict[str, Any]) -> List[EggSale]:
    query = db.query(EggSale)
    quality = _enum_filter(filters, "quality", EggQuality)
    if quality is not None:
        query = query.filter(EggSale.quality == quality)
    query = _date_range(query, EggSale.sale_date, filters, "date_from", "date_to")
    return query.order_by(EggSale.sale_date.desc(), EggSale.id.desc()).all()


def _fetch_other_expenses(db: Session, filters: Dict[str, Any]) -> List[OtherExpense]:
    query = db.query(OtherExpense)
    expense_type = _enum_filter(filters, "expense_type", ExpenseType)
    if expense_type is not None:
        query = query.filter(OtherExpense.expense_type == expense_type)
    query = _date_range(query, OtherExpense.expense_date, filters, "date_from", "date_to")
    return query.order_by(OtherExpense.expense_date.desc(), OtherExpense.id.desc()).all()


# ---------- columnas ----------

def _money(value: Optional[float], decimals: int = 2) -> str:
    return f"{(value or 0.0):.{decimals}f}"


def _day(value) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    return value.isoformat()


Column = Tuple[str, Callable[[Any], str]]

COLUMNS: Dict[str, Sequence[Column]] = {
    "raw_materials": (
        ("ID", lambda r: str(r.id)),
        ("Name", lambda r: r.name),
        ("Price per KG", lambda r: _money(r.price_per_kg)),
        ("Created At", lambda r: _day(r.created_at)),
    ),
    "finished_feeds": (
        ("ID", lambda r: str(r.id)),
        ("Name", lambda r: r.name),
        ("Cost per KG", lambda r: _money(r.cost_per_kg)),
        ("Created At", lambda r: _day(r.created_at)),
    ),
    "flocks": (
        ("ID", lambda r: str(r.id)),
        ("Strain", lambda r: r.strain),
        ("Entry Date", lambda r: _day(r.entry_date)),
        ("Initial Count", lambda r: str(r.initial_count)),
        ("Current Count", lambda r: str(r.current_count)),
    ),
    "feed_consumption": (
        ("ID", lambda r: str(r.id)),
        ("Flock ID", lambda r: str(r.flock_id)),
        ("Feed ID", lambda r: str(r.finished_feed_id)),
        ("Date", lambda r: _day(r.consumption_date)),
        ("Quantity (KG)", lambda r: _money(r.quantity_kg)),
        ("Cost", lambda r: _money(r.cost)),
    ),
    "egg_production": (
        ("ID", lambda r: str(r.id)),
        ("Flock ID", lambda r: str(r.flock_id)),
        ("Date", lambda r: _day(r.production_date)),
        ("Quality", lambda r: r.quality.value),
        ("Quantity", lambda r: str(r.quantity)),
    ),
    "egg_sales": (
        ("ID", lambda r: str(r.id)),
        ("Sale Date", lambda r: _day(r.sale_date)),
        ("Quality", lambda r: r.quality.value),
        ("Quantity", lambda r: str(r.quantity)),
        ("Price per Egg", lambda r: _money(r.price_per_egg, 4)),
        ("Total Price", lambda r: _money(r.total_price)),
    ),
    "other_expenses": (
        ("ID", lambda r: str(r.id)),
        ("Date", lambda r: _day(r.expense_date)),
        ("Type", lambda r: r.expense_type.value),
        ("Description", lambda r: r.description),
        ("Amount", lambda r: _money(r.amount)),
    ),
}

FETCHERS: Dict[str, Callable[[Session, Dict[str, Any]], list]] = {
    "raw_materials": _fetch_raw_materials,
    "finished_feeds": _fetch_finished_feeds,
    "flocks": _fetch_flocks,
    "feed_consumption": _fetch_feed_consumption,
    "egg_production": _fetch_egg_production,
    "egg_sales": _fetch_egg_sales,
    "other_expenses": _fetch_other_expenses,
}

ENTITY_TYPES = tuple(FETCHERS) + ("profit_report",)


# ---------- generadores ----------

def generate_text_report(rows: list, entity_type: str) -> bytes:
    columns = COLUMNS[entity_type]
    header = " | ".join(title for title, _ in columns)

    lines = [
        f"{entity_type.upper().replace('_', ' ')} Report",
        f"Generated on: {date.today().isoformat()}",
        "",
        header,
        "-" * len(header),
    ]
    for row in rows:
        lines.append(" | ".join(fmt(row) for _, fmt in columns))

    return ("\n".join(lines) + "\n").encode("utf-8")


def generate_csv(rows: list, entity_type: str) -> bytes:
    columns = COLUMNS[entity_type]

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow([title for title, _ in columns])
    for row in rows:
        writer.writerow([fmt(row) for _, fmt in columns])

    return output.getvalue().encode("utf-8")


def generate_profit_report_text(report: ProfitReport) -> bytes:
    lines = [
        "Profit Report",
        f"Period: {report.period_start.isoformat()} - {report.period_end.isoformat()}",
        f"Generated on: {date.today().isoformat()}",
        "",
        "Summary",
        "-" * 20,
        f"Total Revenue: ${report.total_revenue:.2f}",
        f"Total Feed Cost: ${report.total_feed_cost:.2f}",
        f"Total Other Expenses: ${report.total_other_expenses:.2f}",
        f"Net Profit: ${report.total_profit:.2f}",
    ]
    return ("\n".join(lines) + "\n").encode("utf-8")


def generate_profit_report_csv(report: ProfitReport) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(["Profit Report Summary"])
    writer.writerow(["Period", f"{report.period_start.isoformat()} - {report.period_end.isoformat()}"])
    writer.writerow([])
    writer.writerow(["Total Revenue", _money(report.total_revenue)])
    writer.writerow(["Total Feed Cost", _money(report.total_feed_cost)])
    writer.writerow(["Total Other Expenses", _money(report.total_other_expenses)])
    writer.writerow(["Net Profit", _money(report.total_profit)])
    return output.getvalue().encode("utf-8")


# ---------- API del servicio ----------

def export_profit_report(
    db: Session,
    format: ExportFormat,
    start_date: date,
    end_date: date,
) -> bytes:
    report = profit_report_service.generate_profit_report(db, start_date, end_date)

    if format == ExportFormat.pdf:
        content = generate_profit_report_text(report)
    else:
        content = generate_profit_report_csv(report)

    logger.info(
        "Informe de beneficios exportado",
        format=format.value,
        period_start=str(start_date),
        period_end=str(end_date),
        size_bytes=len(content),
    )
    return content


def export_data(
    db: Session,
    format: ExportFormat,
    entity_type: str,
    filters: Optional[Dict[str, Any]] = None,
) -> bytes:
    filters = filters or {}

    if entity_type == "profit_report":
        start_date = _date_filter(filters, "date_from")
        end_date = _date_filter(filters, "date_to")
        if start_date is None or end_date is None:
            raise InvalidFilterError("Invalid filter: profit_report requires date_from and date_to")
        return export_profit_report(db, format, start_date, end_date)

    fetch = FETCHERS.get(entity_type)
    if fetch is None:
        logger.warning("Exportación de tipo no soportado", entity_type=entity_type)
        raise UnsupportedEntityError(entity_type)

    rows = fetch(db, filters)

    if format == ExportFormat.pdf:
        content = generate_text_report(rows, entity_type)
    else:
        content = generate_csv(rows, entity_type)

    logger.info(
        "Datos exportados",
        entity_type=entity_type,
        format=format.value,
        rows=len(rows),
        size_bytes=len(content),
    )
    return content


def export_filename(entity_type: str, format: ExportFormat) -> str:
    return f"{entity_type}_{date.today().isoformat()}.{FILE_EXTENSIONS[format]}"
