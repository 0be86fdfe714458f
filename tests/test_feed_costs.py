"""Tests for finished feeds and the weighted feed-cost calculation."""
import pytest

from app.core.errors import (
    DuplicateCompositionError,
    EntityInUseError,
    ForeignKeyMissingError,
    NotFoundError,
)
from app.schemas.chicken_flock import ChickenFlockCreate
from app.schemas.feed_composition import FeedCompositionCreate, FeedCompositionUpdate
from app.schemas.feed_consumption import FeedConsumptionCreate
from app.schemas.finished_feed import FinishedFeedCreate, FinishedFeedUpdate
from app.schemas.raw_material import RawMaterialCreate
from app.services import (
    chicken_flock_service,
    feed_composition_service,
    feed_consumption_service,
    finished_feed_service,
    raw_material_service,
)


def _material(db, name, price):
    return raw_material_service.create_raw_material(
        db, RawMaterialCreate(name=name, price_per_kg=price)
    )


def _feed(db, name="Pienso ponedoras"):
    return finished_feed_service.create_finished_feed(db, FinishedFeedCreate(name=name))


def _compose(db, feed_id, material_id, percentage):
    return feed_composition_service.create_feed_composition(
        db,
        FeedCompositionCreate(
            finished_feed_id=feed_id, raw_material_id=material_id, percentage=percentage
        ),
    )


def _cost(db, feed_id):
    return finished_feed_service.get_finished_feed(db, feed_id).cost_per_kg


class TestFinishedFeedCrud:

    def test_new_feed_costs_zero(self, db_session):
        feed = _feed(db_session)
        assert feed.cost_per_kg == 0.0

    def test_rename(self, db_session):
        feed = _feed(db_session)
        updated = finished_feed_service.update_finished_feed(
            db_session, feed.id, FinishedFeedUpdate(name="Arranque")
        )
        assert updated.name == "Arranque"

    def test_update_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError, match="not found"):
            finished_feed_service.update_finished_feed(
                db_session, 999, FinishedFeedUpdate(name="X")
            )

    def test_delete_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError, match="not found"):
            finished_feed_service.delete_finished_feed(db_session, 999)

    def test_delete_removes_its_compositions(self, db_session):
        material = _material(db_session, "Maíz", 2.5)
        feed = _feed(db_session)
        composition = _compose(db_session, feed.id, material.id, 60)

        finished_feed_service.delete_finished_feed(db_session, feed.id)

        assert finished_feed_service.get_finished_feed(db_session, feed.id) is None
        assert feed_composition_service.get_feed_composition(db_session, composition.id) is None
        assert raw_material_service.get_raw_material(db_session, material.id) is not None

    def test_delete_consumed_feed_is_rejected(self, db_session):
        feed = _feed(db_session)
        flock = chicken_flock_service.create_chicken_flock(
            db_session,
            ChickenFlockCreate(strain="Lohmann", entry_date="2024-01-01", initial_count=100),
        )
        feed_consumption_service.create_feed_consumption(
            db_session,
            FeedConsumptionCreate(
                flock_id=flock.id,
                finished_feed_id=feed.id,
                consumption_date="2024-01-02",
                quantity_kg=10,
            ),
        )

        with pytest.raises(EntityInUseError):
            finished_feed_service.delete_finished_feed(db_session, feed.id)


class TestFeedCost:

    def test_weighted_cost_example(self, db_session):
        """60% @ 2.50 + 40% @ 3.20 = 1.50 + 1.28 = 2.78"""
        corn = _material(db_session, "Maíz", 2.50)
        soy = _material(db_session, "Soja", 3.20)
        feed = _feed(db_session)

        _compose(db_session, feed.id, corn.id, 60)
        _compose(db_session, feed.id, soy.id, 40)

        assert _cost(db_session, feed.id) == pytest.approx(2.78)

    def test_cost_follows_each_composition_write(self, db_session):
        corn = _material(db_session, "Maíz", 2.50)
        soy = _material(db_session, "Soja", 3.20)
        feed = _feed(db_session)

        first = _compose(db_session, feed.id, corn.id, 60)
        assert _cost(db_session, feed.id) == pytest.approx(1.50)

        _compose(db_session, feed.id, soy.id, 40)
        assert _cost(db_session, feed.id) == pytest.approx(2.78)

        feed_composition_service.update_feed_composition(
            db_session, first.id, FeedCompositionUpdate(percentage=50)
        )
        assert _cost(db_session, feed.id) == pytest.approx(1.25 + 1.28)

        feed_composition_service.delete_feed_composition(db_session, first.id)
        assert _cost(db_session, feed.id) == pytest.approx(1.28)

    def test_removing_last_composition_gives_zero(self, db_session):
        corn = _material(db_session, "Maíz", 2.50)
        feed = _feed(db_session)
        composition = _compose(db_session, feed.id, corn.id, 100)

        feed_composition_service.delete_feed_composition(db_session, composition.id)

        assert _cost(db_session, feed.id) == 0.0

    def test_percentages_above_100_are_not_normalised(self, db_session):
        corn = _material(db_session, "Maíz", 1.0)
        soy = _material(db_session, "Soja", 1.0)
        feed = _feed(db_session)

        _compose(db_session, feed.id, corn.id, 80)
        _compose(db_session, feed.id, soy.id, 80)

        assert _cost(db_session, feed.id) == pytest.approx(1.6)

    def test_cost_of_one_feed_ignores_other_feeds(self, db_session):
        corn = _material(db_session, "Maíz", 2.0)
        feed_a = _feed(db_session, "A")
        feed_b = _feed(db_session, "B")

        _compose(db_session, feed_a.id, corn.id, 100)

        assert _cost(db_session, feed_a.id) == pytest.approx(2.0)
        assert _cost(db_session, feed_b.id) == 0.0

    def test_update_feed_cost_missing_feed(self, db_session):
        with pytest.raises(NotFoundError, match="not found"):
            finished_feed_service.update_feed_cost(db_session, 999)


class TestFeedCompositions:

    def test_missing_feed(self, db_session):
        corn = _material(db_session, "Maíz", 2.0)
        with pytest.raises(ForeignKeyMissingError, match="Finished feed with id 999 not found"):
            _compose(db_session, 999, corn.id, 50)

    def test_missing_material(self, db_session):
        feed = _feed(db_session)
        with pytest.raises(ForeignKeyMissingError, match="Raw material with id 999 not found"):
            _compose(db_session, feed.id, 999, 50)

    def test_duplicate_pair_is_rejected(self, db_session):
        corn = _material(db_session, "Maíz", 2.0)
        feed = _feed(db_session)
        _compose(db_session, feed.id, corn.id, 50)

        with pytest.raises(DuplicateCompositionError, match="Composition already exists"):
            _compose(db_session, feed.id, corn.id, 20)

    def test_list_by_finished_feed(self, db_session):
        corn = _material(db_session, "Maíz", 2.0)
        feed_a = _feed(db_session, "A")
        feed_b = _feed(db_session, "B")
        _compose(db_session, feed_a.id, corn.id, 50)
        _compose(db_session, feed_b.id, corn.id, 70)

        rows = feed_composition_service.list_by_finished_feed(db_session, feed_b.id)

        assert [r.percentage for r in rows] == [70]

    def test_update_missing(self, db_session):
        with pytest.raises(NotFoundError, match="Feed composition with id 999 not found"):
            feed_composition_service.update_feed_composition(
                db_session, 999, FeedCompositionUpdate(percentage=10)
            )

    def test_delete_missing(self, db_session):
        with pytest.raises(NotFoundError, match="Feed composition with id 999 not found"):
            feed_composition_service.delete_feed_composition(db_session, 999)
