"""
SkinCycleService — the adapter between storage and the pure engine.

Every call reads catalog and history fresh, runs the engine, and writes back
only what changed. Dates default to the local clock; tests pass them in. A lookup
date never becomes the cycle start, which is fixed by the real clock.
"""

import datetime as dt
import logging
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.history import history_view, log_routine
from app.core.recommendation import recommend, shelf_status
from app.repository import StateRepository
from app.schemas import (
    AppSettings,
    DailyPlan,
    HistoryEntry,
    HistoryItem,
    Product,
    ProductCreate,
    ShelfItem,
)

logger = logging.getLogger(__name__)

repo = StateRepository()


class EmptySelectionError(ValueError):
    """Raised when a routine is saved with no products selected."""


class UnknownProductError(LookupError):
    """Raised when deleting a product that is not on the shelf."""


class SkinCycleService:
    def __init__(self, repository: Optional[StateRepository] = None):
        self.repo = repository or repo
        self.time_format = get_settings().routine_time_format

    async def today_plan(self, db: AsyncSession, today: Optional[dt.date] = None) -> DailyPlan:
        today = today or dt.date.today()
        start_date = await self.repo.get_start_date(db)
        products = await self.repo.load_products(db)
        history = await self.repo.load_history(db)

        plan = recommend(products, history, start_date, today)
        logger.info(
            f"Plan for {today} | Day {plan.current_step.day_number} "
            f"({plan.current_step.description}) | Offered: {len(plan.products)}/{len(products)}"
        )
        return plan

    async def log_routine(
        self,
        db: AsyncSession,
        product_ids: Sequence[str],
        now: Optional[dt.datetime] = None,
    ) -> HistoryEntry:
        if not product_ids:
            raise EmptySelectionError("Select at least one product")

        now = now or dt.datetime.now()
        history = await self.repo.load_history(db)
        history = log_routine(history, now.date(), now.time(), product_ids, self.time_format)
        await self.repo.save_history(db, history)

        entry = history[0]
        logger.info(f"Logged routine | {entry.date} {entry.time} | Products: {len(product_ids)}")
        return entry

    async def shelf(self, db: AsyncSession, today: Optional[dt.date] = None) -> list[ShelfItem]:
        products = await self.repo.load_products(db)
        history = await self.repo.load_history(db)
        return shelf_status(products, history, today or dt.date.today())

    async def add_product(self, db: AsyncSession, payload: ProductCreate) -> Product:
        products = await self.repo.load_products(db)
        product = payload.to_product()
        await self.repo.save_products(db, [*products, product])
        logger.info(f"Added product {product.name!r} ({product.type.value}, cooldown {product.cooldown_days})")
        return product

    async def delete_product(self, db: AsyncSession, product_id: str) -> Product:
        """Remove a product. History entries that mention it are left alone."""
        products = await self.repo.load_products(db)
        removed = next((p for p in products if p.id == product_id), None)
        if removed is None:
            raise UnknownProductError(product_id)

        await self.repo.save_products(db, [p for p in products if p.id != product_id])
        logger.info(f"Deleted product {removed.name!r}")
        return removed

    async def history(self, db: AsyncSession, today: Optional[dt.date] = None) -> list[HistoryItem]:
        products = await self.repo.load_products(db)
        history = await self.repo.load_history(db)
        return history_view(history, products, today or dt.date.today())

    async def clear_history(self, db: AsyncSession) -> None:
        await self.repo.clear_history(db)

    async def settings(self, db: AsyncSession) -> AppSettings:
        return AppSettings(
            is_dark_theme=await self.repo.get_is_dark_theme(db),
            start_date=await self.repo.get_start_date(db),
        )

    async def set_theme(self, db: AsyncSession, is_dark: bool) -> AppSettings:
        await self.repo.set_is_dark_theme(db, is_dark)
        return await self.settings(db)
