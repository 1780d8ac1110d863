#!/usr/bin/env python3
"""
Prepare a SkinCycle store before the API first serves it.

Creates the app_state table, pins cycle day 1 to today's date unless a start
date is already stored, and reports where the 11-day cycle stands along with
shelf and history counts.
"""

import asyncio
import datetime as dt
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.routine import step_for_offset
from app.database import SessionLocal, engine, init_db
from app.repository import StateRepository

logger = logging.getLogger(__name__)


async def prepare_state(db: AsyncSession, today: dt.date, repo: StateRepository | None = None) -> dict:
    """Pin the cycle start and summarize the stored routine state."""
    repo = repo or StateRepository()
    start = await repo.init_start_date(db, today)
    products = await repo.load_products(db)
    history = await repo.load_history(db)
    step = step_for_offset((today - start).days)

    summary = {
        "start_date": start,
        "day_number": step.day_number,
        "description": step.description,
        "products": len(products),
        "history": len(history),
    }
    logger.info(
        f"Cycle started {start} | Today is day {step.day_number} ({step.description}) | "
        f"Shelf: {len(products)} products | History: {len(history)} routines"
    )
    return summary


async def main():
    """Create the SkinCycle tables and pin the routine start date"""
    try:
        settings = get_settings()
        logger.info(f"Preparing SkinCycle store at {settings.database_url}")

        await init_db()
        logger.info("app_state table ready")

        async with SessionLocal() as db:
            await prepare_state(db, dt.date.today())
        logger.info("✅ SkinCycle store ready")

    except Exception as e:
        logger.error(f"❌ Could not prepare SkinCycle store: {str(e)}")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=get_settings().log_level)
    asyncio.run(main())
