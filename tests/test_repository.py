"""
Store contract tests against an in-memory SQLite database.
"""

import datetime as dt

import pytest

from app.schemas import HistoryEntry, Product, ProductType


def _products() -> list[Product]:
    return [
        Product(id="p1", name="Gel", type=ProductType.CLEANSER),
        Product(id="p2", name="Retinal", type=ProductType.RETINOL, cooldown_days=2),
    ]


def _history() -> list[HistoryEntry]:
    return [
        HistoryEntry(date="2024-03-10", time="21:00", products_used_ids=["p2"]),
        HistoryEntry(date="2024-03-10", time="09:15", products_used_ids=["p1", "p2"]),
    ]


class TestCollections:
    @pytest.mark.anyio
    async def test_empty_store_loads_empty(self, db, repo):
        assert await repo.load_products(db) == []
        assert await repo.load_history(db) == []

    @pytest.mark.anyio
    async def test_products_persist(self, session_factory, repo):
        async with session_factory() as db:
            await repo.save_products(db, _products())
        async with session_factory() as db:
            assert await repo.load_products(db) == _products()

    @pytest.mark.anyio
    async def test_history_keeps_order(self, session_factory, repo):
        async with session_factory() as db:
            await repo.save_history(db, _history())
        async with session_factory() as db:
            loaded = await repo.load_history(db)
        assert [e.time for e in loaded] == ["21:00", "09:15"]

    @pytest.mark.anyio
    async def test_clear_history_leaves_catalog(self, db, repo):
        await repo.save_products(db, _products())
        await repo.save_history(db, _history())

        await repo.clear_history(db)

        assert await repo.load_history(db) == []
        assert await repo.load_products(db) == _products()

    @pytest.mark.anyio
    async def test_records_stored_in_contract_shape(self, db, repo):
        await repo.save_products(db, _products()[1:])
        state = await repo.get_state(db)
        assert state.products_json == [
            {"id": "p2", "name": "Retinal", "type": "retinol", "cooldownDays": 2}
        ]

    @pytest.mark.anyio
    async def test_malformed_records_skipped(self, db, repo):
        state = await repo.get_state(db)
        state.products_json = [
            {"id": "ok", "name": "Fine", "type": "acid", "cooldownDays": 1},
            {"id": "bad-type", "name": "X", "type": "serum", "cooldownDays": 1},
            {"name": "no id or type"},
            "garbage",
        ]
        state.history_json = [{"date": "2024-01-01"}, 42]
        await repo.save(db, state)

        products = await repo.load_products(db)
        assert [p.id for p in products] == ["ok"]
        assert await repo.load_history(db) == []

    @pytest.mark.anyio
    async def test_non_list_collection_is_empty(self, db, repo):
        state = await repo.get_state(db)
        state.history_json = {"not": "a list"}
        await repo.save(db, state)
        assert await repo.load_history(db) == []


class TestSettings:
    @pytest.mark.anyio
    async def test_start_date_initialized_once(self, db, repo):
        first = await repo.init_start_date(db, dt.date(2024, 1, 1))
        again = await repo.init_start_date(db, dt.date(2024, 6, 1))
        later = await repo.get_start_date(db)
        assert first == again == later == dt.date(2024, 1, 1)

    @pytest.mark.anyio
    async def test_first_read_persists_real_today(self, session_factory, repo):
        today = dt.date.today()
        async with session_factory() as db:
            assert await repo.get_start_date(db) == today
        async with session_factory() as db:
            state = await repo.get_state(db)
            assert state.start_date == today.isoformat()

    @pytest.mark.anyio
    async def test_malformed_start_date_reset(self, db, repo):
        state = await repo.get_state(db)
        state.start_date = "someday"
        await repo.save(db, state)
        assert await repo.init_start_date(db, dt.date(2024, 4, 4)) == dt.date(2024, 4, 4)

    @pytest.mark.anyio
    @pytest.mark.parametrize("stored", ["20240101", "2024-W01-1", "2024-1-1"])
    async def test_non_calendar_start_date_reset(self, db, repo, stored):
        state = await repo.get_state(db)
        state.start_date = stored
        await repo.save(db, state)
        assert await repo.init_start_date(db, dt.date(2024, 4, 4)) == dt.date(2024, 4, 4)
        assert (await repo.get_state(db)).start_date == "2024-04-04"

    @pytest.mark.anyio
    async def test_theme_defaults_and_toggles(self, db, repo):
        assert await repo.get_is_dark_theme(db) is True
        await repo.set_is_dark_theme(db, False)
        assert await repo.get_is_dark_theme(db) is False
