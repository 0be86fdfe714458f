import pytest

from app.models import ChickenFlock, FinishedFeed, RawMaterial
from app.seed_data import seed_all


class TestSeedData:

    def test_seed_creates_priced_layer_feed(self, db_session):
        seed_all(db_session)

        feed = db_session.query(FinishedFeed).one()
        # 0.60*0.32 + 0.28*0.48 + 0.10*0.12 + 0.02*2.90
        assert feed.cost_per_kg == pytest.approx(0.192 + 0.1344 + 0.012 + 0.058)
        assert len(feed.compositions) == 4
        assert db_session.query(ChickenFlock).count() == 1

    def test_seed_is_idempotent(self, db_session):
        seed_all(db_session)
        seed_all(db_session)

        assert db_session.query(RawMaterial).count() == 4
        assert db_session.query(FinishedFeed).count() == 1
