"""Tests for the profit report and the text/CSV exports."""
import csv
import io
from datetime import date

import pytest

from app.core.errors import InvalidFilterError, UnsupportedEntityError
from app.models.enums import EggQuality, ExpenseType
from app.schemas.chicken_flock import ChickenFlockCreate
from app.schemas.egg_sale import EggSaleCreate
from app.schemas.feed_composition import FeedCompositionCreate
from app.schemas.feed_consumption import FeedConsumptionCreate
from app.schemas.finished_feed import FinishedFeedCreate
from app.schemas.other_expense import OtherExpenseCreate
from app.schemas.raw_material import RawMaterialCreate
from app.schemas.reports import ExportFormat
from app.services import (
    chicken_flock_service,
    egg_sale_service,
    export_service,
    feed_composition_service,
    feed_consumption_service,
    finished_feed_service,
    other_expense_service,
    profit_report_service,
    raw_material_service,
)

MARCH = (date(2024, 3, 1), date(2024, 3, 31))


@pytest.fixture
def march_records(db_session):
    """
    Marzo 2024: ventas 100 × 0.25, consumo 10 kg de pienso a 2.00 €/kg
    y 5.00 de electricidad. Abril lleva registros que no deben contar.
    """
    material = raw_material_service.create_raw_material(
        db_session, RawMaterialCreate(name="Maíz", price_per_kg=2.0)
    )
    feed = finished_feed_service.create_finished_feed(
        db_session, FinishedFeedCreate(name="Ponedoras")
    )
    feed_composition_service.create_feed_composition(
        db_session,
        FeedCompositionCreate(finished_feed_id=feed.id, raw_material_id=material.id, percentage=100),
    )
    flock = chicken_flock_service.create_chicken_flock(
        db_session,
        ChickenFlockCreate(strain="Lohmann Brown", entry_date=date(2024, 1, 1), initial_count=100),
    )

    for day, kg in [(date(2024, 3, 10), 10.0), (date(2024, 4, 2), 500.0)]:
        feed_consumption_service.create_feed_consumption(
            db_session,
            FeedConsumptionCreate(
                flock_id=flock.id, finished_feed_id=feed.id, consumption_date=day, quantity_kg=kg
            ),
        )
    for day, quantity in [(date(2024, 3, 15), 100), (date(2024, 4, 2), 5000)]:
        egg_sale_service.create_egg_sale(
            db_session,
            EggSaleCreate(sale_date=day, quality=EggQuality.A, quantity=quantity, price_per_egg=0.25),
        )
    other_expense_service.create_other_expense(
        db_session,
        OtherExpenseCreate(
            expense_date=date(2024, 3, 31),
            expense_type=ExpenseType.electricity,
            description="Luz nave 1",
            amount=5.0,
        ),
    )
    return flock


class TestProfitReport:

    def test_profit_for_period(self, db_session, march_records):
        report = profit_report_service.generate_profit_report(db_session, *MARCH)

        assert report.total_revenue == pytest.approx(25.0)
        assert report.total_feed_cost == pytest.approx(20.0)
        assert report.total_other_expenses == pytest.approx(5.0)
        assert report.total_profit == pytest.approx(0.0)
        assert report.period_start == MARCH[0]
        assert report.period_end == MARCH[1]

    def test_empty_period_is_all_zero(self, db_session):
        report = profit_report_service.generate_profit_report(
            db_session, date(2020, 1, 1), date(2020, 1, 31)
        )

        assert report.total_revenue == 0.0
        assert report.total_feed_cost == 0.0
        assert report.total_other_expenses == 0.0
        assert report.total_profit == 0.0


class TestDataExport:

    def test_text_report_layout(self, db_session, march_records):
        content = export_service.export_data(
            db_session, ExportFormat.pdf, "egg_sales"
        ).decode("utf-8")
        lines = content.splitlines()

        assert lines[0] == "EGG SALES Report"
        assert lines[1].startswith("Generated on: ")
        assert lines[2] == ""
        assert lines[3] == "ID | Sale Date | Quality | Quantity | Price per Egg | Total Price"
        assert set(lines[4]) == {"-"}
        # Más reciente primero
        assert "2024-04-02" in lines[5]
        assert "2024-03-15" in lines[6]
        assert "0.2500" in lines[6]
        assert "25.00" in lines[6]

    def test_csv_export_with_date_filters(self, db_session, march_records):
        content = export_service.export_data(
            db_session,
            ExportFormat.excel,
            "feed_consumption",
            {"date_from": "2024-03-01", "date_to": "2024-03-31"},
        ).decode("utf-8")
        rows = list(csv.reader(io.StringIO(content)))

        assert rows[0] == ["ID", "Flock ID", "Feed ID", "Date", "Quantity (KG)", "Cost"]
        assert len(rows) == 2
        assert rows[1][3] == "2024-03-10"
        assert rows[1][4] == "10.00"
        assert rows[1][5] == "20.00"

    def test_enum_filter(self, db_session, march_records):
        content = export_service.export_data(
            db_session, ExportFormat.excel, "other_expenses", {"expense_type": "labor"}
        ).decode("utf-8")

        assert content.splitlines() == ["ID,Date,Type,Description,Amount"]

    def test_flock_export_with_strain_filter(self, db_session, march_records):
        content = export_service.export_data(
            db_session, ExportFormat.excel, "flocks", {"strain": "Lohmann Brown"}
        ).decode("utf-8")
        rows = list(csv.reader(io.StringIO(content)))

        assert rows[1][1] == "Lohmann Brown"
        assert rows[1][3] == "100"

    def test_profit_report_entity_type(self, db_session, march_records):
        content = export_service.export_data(
            db_session,
            ExportFormat.excel,
            "profit_report",
            {"date_from": "2024-03-01", "date_to": "2024-03-31"},
        ).decode("utf-8")
        rows = list(csv.reader(io.StringIO(content)))

        assert rows[0] == ["Profit Report Summary"]
        assert ["Total Revenue", "25.00"] in rows
        assert ["Net Profit", "0.00"] in rows

    def test_profit_report_requires_dates(self, db_session):
        with pytest.raises(InvalidFilterError):
            export_service.export_data(db_session, ExportFormat.pdf, "profit_report", {})

    def test_unsupported_entity(self, db_session):
        with pytest.raises(UnsupportedEntityError, match="Unsupported entity type: hens"):
            export_service.export_data(db_session, ExportFormat.pdf, "hens")

    @pytest.mark.parametrize(
        "entity_type, filters",
        [
            ("egg_production", {"date_from": "yesterday"}),
            ("egg_production", {"flock_id": "abc"}),
            ("egg_production", {"quality": "Z"}),
            ("egg_production", {"quality": ["A"]}),
            ("egg_production", {"flock_id": 10**20}),
            ("feed_consumption", {"flock_id": -(10**20)}),
            ("raw_materials", {"name": ["x"]}),
            ("raw_materials", {"min_price": 10**400}),
            ("finished_feeds", {"name": {"eq": "Ponedoras"}}),
            ("flocks", {"strain": ["Lohmann Brown"]}),
        ],
    )
    def test_invalid_filters(self, db_session, entity_type, filters):
        with pytest.raises(InvalidFilterError):
            export_service.export_data(db_session, ExportFormat.excel, entity_type, filters)

    def test_scalar_name_filter_is_matched_as_text(self, db_session, march_records):
        content = export_service.export_data(
            db_session, ExportFormat.excel, "raw_materials", {"name": "Maíz"}
        ).decode("utf-8")

        assert len(content.splitlines()) == 2

    def test_profit_report_text(self, db_session, march_records):
        content = export_service.export_profit_report(
            db_session, ExportFormat.pdf, *MARCH
        ).decode("utf-8")

        assert content.startswith("Profit Report\nPeriod: 2024-03-01 - 2024-03-31\n")
        assert "Total Revenue: $25.00" in content
        assert "Total Feed Cost: $20.00" in content
        assert "Net Profit: $0.00" in content

    def test_filename(self):
        name = export_service.export_filename("egg_sales", ExportFormat.excel)
        assert name.startswith("egg_sales_")
        assert name.endswith(".csv")
