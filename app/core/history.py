"""
Usage log helpers. History is stored newest-first and only ever grows at
the front, except for a full clear.
"""

import datetime as dt
from typing import Sequence

from app.core.cooldown import parse_entry_date
from app.schemas import HistoryEntry, HistoryItem, Product


def log_routine(
    history: Sequence[HistoryEntry],
    today: dt.date,
    now_time: dt.time,
    selected_ids: Sequence[str],
    time_format: str = "%H:%M",
) -> list[HistoryEntry]:
    """Return a new history with one entry for this selection prepended.

    Callers must not pass an empty selection. Several entries on the same
    day are fine (morning and evening routines).
    """
    entry = HistoryEntry(
        date=today.isoformat(),
        time=now_time.strftime(time_format),
        day_title="",
        products_used_ids=list(selected_ids),
    )
    return [entry, *history]


def history_view(
    history: Sequence[HistoryEntry],
    products: Sequence[Product],
    today: dt.date,
) -> list[HistoryItem]:
    """Entries ready for display.

    A malformed date shows as `today`; ids of deleted products are skipped.
    """
    by_id = {p.id: p for p in products}
    items = []
    for entry in history:
        shown_on = parse_entry_date(entry) or today
        used = [by_id[pid] for pid in entry.products_used_ids if pid in by_id]
        items.append(HistoryItem(entry=entry, display_date=shown_on, products=used))
    return items
