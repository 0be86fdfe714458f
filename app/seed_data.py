from datetime import date

from sqlalchemy.orm import Session

from app.db import SessionLocal, Base, engine
from app.models.chicken_flock import ChickenFlock
from app.models.finished_feed import FinishedFeed
from app.models.raw_material import RawMaterial
from app.schemas.chicken_flock import ChickenFlockCreate
from app.schemas.feed_composition import FeedCompositionCreate
from app.schemas.finished_feed import FinishedFeedCreate
from app.schemas.raw_material import RawMaterialCreate
from app.services import (
    chicken_flock_service,
    feed_composition_service,
    finished_feed_service,
    raw_material_service,
)

# (nombre, precio €/kg)
RAW_MATERIALS = [
    ("Maíz", 0.32),
    ("Harina de soja", 0.48),
    ("Carbonato cálcico", 0.12),
    ("Corrector vitamínico", 2.90),
]

# Pienso de puesta: porcentaje de cada materia prima
LAYER_FEED = {
    "Maíz": 60.0,
    "Harina de soja": 28.0,
    "Carbonato cálcico": 10.0,
    "Corrector vitamínico": 2.0,
}


def create_tables() -> None:
    # Por si el esquema no está creado aún
    Base.metadata.create_all(bind=engine)


def seed_raw_materials(db: Session) -> None:
    if db.query(RawMaterial).count() > 0:
        return

    for name, price_per_kg in RAW_MATERIALS:
        raw_material_service.create_raw_material(
            db,
            RawMaterialCreate(name=name, price_per_kg=price_per_kg),
        )


def seed_finished_feeds(db: Session) -> None:
    if db.query(FinishedFeed).count() > 0:
        return

    feed = finished_feed_service.create_finished_feed(
        db,
        FinishedFeedCreate(name="Pienso ponedoras"),
    )

    materials = {m.name: m.id for m in db.query(RawMaterial).all()}
    for name, percentage in LAYER_FEED.items():
        if name not in materials:
            continue
        # El servicio de composiciones recalcula el coste del pienso
        feed_composition_service.create_feed_composition(
            db,
            FeedCompositionCreate(
                finished_feed_id=feed.id,
                raw_material_id=materials[name],
                percentage=percentage,
            ),
        )


def seed_chicken_flocks(db: Session) -> None:
    if db.query(ChickenFlock).count() > 0:
        return

    chicken_flock_service.create_chicken_flock(
        db,
        ChickenFlockCreate(
            strain="Lohmann Brown",
            entry_date=date(2024, 3, 1),
            initial_count=1200,
            age_upon_entry_days=112,
        ),
    )


def seed_all(db: Session) -> None:
    seed_raw_materials(db)
    seed_finished_feeds(db)
    seed_chicken_flocks(db)


def main() -> None:
    create_tables()
    db = SessionLocal()
    try:
        seed_all(db)
        print("✅ Seed completado: materias primas, piensos y lotes.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
