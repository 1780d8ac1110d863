"""
Cooldown evaluation: is a product usable on a given day?

A product with cooldown N used on day D rests on D..D+N and is offered again
from D+N+1. Entries whose date does not parse are ignored here.
"""

import datetime as dt
import logging
from typing import Iterable, Optional

from app.schemas import CooldownStatus, HistoryEntry, Product

logger = logging.getLogger(__name__)


def parse_iso_date(value: str) -> Optional[dt.date]:
    """Parse a `YYYY-MM-DD` date; anything else (compact, week or unpadded forms) is None."""
    try:
        parsed = dt.datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        return None
    # strptime also takes "2024-1-1"
    if parsed.isoformat() != value:
        return None
    return parsed


def parse_entry_date(entry: HistoryEntry) -> Optional[dt.date]:
    """ISO date of an entry, or None when the stored value is malformed."""
    parsed = parse_iso_date(entry.date)
    if parsed is None:
        logger.debug(f"Ignoring malformed history date: {entry.date!r}")
    return parsed


def usage_dates(product_id: str, history: Iterable[HistoryEntry]) -> list[dt.date]:
    dates = []
    for entry in history:
        if product_id not in entry.products_used_ids:
            continue
        used_on = parse_entry_date(entry)
        if used_on is not None:
            dates.append(used_on)
    return dates


def last_used_on(product_id: str, history: Iterable[HistoryEntry]) -> Optional[dt.date]:
    dates = usage_dates(product_id, history)
    return max(dates) if dates else None


def evaluate_cooldown(
    product: Product,
    history: Iterable[HistoryEntry],
    reference_date: dt.date,
) -> CooldownStatus:
    # cooldown 0 short-circuits before any date math, even if used today
    if product.cooldown_days == 0:
        return CooldownStatus(eligible=True)

    last_used = last_used_on(product.id, history)
    if last_used is None:
        return CooldownStatus(eligible=True)

    days_since = (reference_date - last_used).days
    if days_since > product.cooldown_days:
        return CooldownStatus(eligible=True)

    return CooldownStatus(
        eligible=False,
        days_remaining=product.cooldown_days - days_since + 1,
    )
