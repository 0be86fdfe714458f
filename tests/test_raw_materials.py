"""Tests for raw feed materials."""
import pytest

from app.core.errors import EntityInUseError, NotFoundError
from app.schemas.feed_composition import FeedCompositionCreate
from app.schemas.finished_feed import FinishedFeedCreate
from app.schemas.raw_material import RawMaterialCreate, RawMaterialUpdate
from app.services import feed_composition_service, finished_feed_service, raw_material_service


class TestRawMaterialCrud:

    def test_create_and_get(self, db_session):
        material = raw_material_service.create_raw_material(
            db_session, RawMaterialCreate(name="Maíz", price_per_kg=0.32)
        )

        assert material.id is not None
        assert material.created_at is not None

        fetched = raw_material_service.get_raw_material(db_session, material.id)
        assert fetched.name == "Maíz"
        assert fetched.price_per_kg == 0.32

    def test_get_missing_returns_none(self, db_session):
        assert raw_material_service.get_raw_material(db_session, 999) is None

    def test_list_is_ordered_and_paginated(self, db_session):
        for i in range(5):
            raw_material_service.create_raw_material(
                db_session, RawMaterialCreate(name=f"Material {i}", price_per_kg=1.0 + i)
            )

        page = raw_material_service.list_raw_materials(db_session, skip=1, limit=2)

        assert [m.name for m in page] == ["Material 1", "Material 2"]

    def test_partial_update(self, db_session):
        material = raw_material_service.create_raw_material(
            db_session, RawMaterialCreate(name="Soja", price_per_kg=0.48)
        )

        updated = raw_material_service.update_raw_material(
            db_session, material.id, RawMaterialUpdate(price_per_kg=0.55)
        )

        assert updated.name == "Soja"
        assert updated.price_per_kg == 0.55

    def test_update_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError, match="not found"):
            raw_material_service.update_raw_material(
                db_session, 999, RawMaterialUpdate(name="X")
            )

    def test_delete_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError, match="not found"):
            raw_material_service.delete_raw_material(db_session, 999)

    def test_delete_leaves_other_materials(self, db_session):
        keep = raw_material_service.create_raw_material(
            db_session, RawMaterialCreate(name="Keep", price_per_kg=1.0)
        )
        drop = raw_material_service.create_raw_material(
            db_session, RawMaterialCreate(name="Drop", price_per_kg=2.0)
        )

        raw_material_service.delete_raw_material(db_session, drop.id)

        assert raw_material_service.get_raw_material(db_session, drop.id) is None
        assert raw_material_service.get_raw_material(db_session, keep.id) is not None


class TestRawMaterialInFeeds:

    def _feed_with(self, db_session, price):
        material = raw_material_service.create_raw_material(
            db_session, RawMaterialCreate(name="Maíz", price_per_kg=price)
        )
        feed = finished_feed_service.create_finished_feed(
            db_session, FinishedFeedCreate(name="Ponedoras")
        )
        feed_composition_service.create_feed_composition(
            db_session,
            FeedCompositionCreate(
                finished_feed_id=feed.id, raw_material_id=material.id, percentage=50
            ),
        )
        return material, feed

    def test_price_change_recomputes_feed_cost(self, db_session):
        material, feed = self._feed_with(db_session, 2.0)
        assert finished_feed_service.get_finished_feed(db_session, feed.id).cost_per_kg == pytest.approx(1.0)

        raw_material_service.update_raw_material(
            db_session, material.id, RawMaterialUpdate(price_per_kg=4.0)
        )

        assert finished_feed_service.get_finished_feed(db_session, feed.id).cost_per_kg == pytest.approx(2.0)

    def test_delete_used_material_is_rejected(self, db_session):
        material, _ = self._feed_with(db_session, 2.0)

        with pytest.raises(EntityInUseError, match="still referenced"):
            raw_material_service.delete_raw_material(db_session, material.id)

        assert raw_material_service.get_raw_material(db_session, material.id) is not None
