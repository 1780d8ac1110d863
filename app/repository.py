"""
State repository — all DB access in one place.

Implements the store contract: products, history and settings. Loading never
fails on bad data; malformed records are skipped and missing ones defaulted.
"""

import datetime as dt
import logging
from typing import Any, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.cooldown import parse_iso_date
from app.models.db import STATE_ROW_ID, AppState
from app.schemas import HistoryEntry, Product

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=BaseModel)


def _load_records(raw: Any, model: Type[RecordType], kind: str) -> list[RecordType]:
    """Validate stored JSON records one by one, dropping the bad ones."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning(f"Stored {kind} collection is not a list, treating as empty")
        return []

    records: list[RecordType] = []
    for item in raw:
        try:
            records.append(model.model_validate(item))
        except ValidationError:
            logger.warning(f"Skipping malformed {kind} record: {item!r}")
    return records


def _dump_records(records: Sequence[BaseModel]) -> list[dict]:
    return [r.model_dump(mode="json", by_alias=True) for r in records]


class StateRepository:
    """Single repository for all DB operations."""

    def __init__(self, default_dark_theme: Optional[bool] = None):
        if default_dark_theme is None:
            default_dark_theme = get_settings().default_dark_theme
        self.default_dark_theme = default_dark_theme

    async def get_state(self, db: AsyncSession) -> AppState:
        result = await db.execute(select(AppState).where(AppState.id == STATE_ROW_ID))
        state = result.scalar_one_or_none()
        if not state:
            state = AppState(id=STATE_ROW_ID, products_json=[], history_json=[])
            db.add(state)
            await db.commit()
            await db.refresh(state)
            logger.info("Created application state row")
        return state

    async def save(self, db: AsyncSession, state: AppState) -> None:
        db.add(state)
        await db.commit()

    # ── Products ────────────────────────────────────────────────────────────

    async def load_products(self, db: AsyncSession) -> list[Product]:
        state = await self.get_state(db)
        return _load_records(state.products_json, Product, "product")

    async def save_products(self, db: AsyncSession, products: Sequence[Product]) -> None:
        state = await self.get_state(db)
        state.products_json = _dump_records(products)
        await self.save(db, state)

    # ── History ─────────────────────────────────────────────────────────────

    async def load_history(self, db: AsyncSession) -> list[HistoryEntry]:
        state = await self.get_state(db)
        return _load_records(state.history_json, HistoryEntry, "history")

    async def save_history(self, db: AsyncSession, history: Sequence[HistoryEntry]) -> None:
        state = await self.get_state(db)
        state.history_json = _dump_records(history)
        await self.save(db, state)

    async def clear_history(self, db: AsyncSession) -> None:
        state = await self.get_state(db)
        state.history_json = []
        await self.save(db, state)
        logger.info("History cleared")

    # ── Settings ────────────────────────────────────────────────────────────

    async def init_start_date(self, db: AsyncSession, today: dt.date) -> dt.date:
        """Return the cycle start date, storing `today` the first time."""
        state = await self.get_state(db)
        if state.start_date:
            stored = parse_iso_date(state.start_date)
            if stored is not None:
                return stored
            logger.warning(f"Stored start date {state.start_date!r} is malformed, resetting")

        state.start_date = today.isoformat()
        await self.save(db, state)
        logger.info(f"Routine cycle starts on {state.start_date}")
        return today

    async def get_start_date(self, db: AsyncSession) -> dt.date:
        """Read the start date; the first read fixes it to the real current date."""
        return await self.init_start_date(db, dt.date.today())

    async def get_is_dark_theme(self, db: AsyncSession) -> bool:
        state = await self.get_state(db)
        if state.is_dark_theme is None:
            return self.default_dark_theme
        return state.is_dark_theme

    async def set_is_dark_theme(self, db: AsyncSession, is_dark: bool) -> None:
        state = await self.get_state(db)
        state.is_dark_theme = is_dark
        await self.save(db, state)
