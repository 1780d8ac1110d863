"""
Daily recommendation: which products to offer today, and in what order.

Pure functions: the caller loads catalog and history, these only read them.
"""

import datetime as dt
from typing import Sequence

from app.core.cooldown import evaluate_cooldown, last_used_on
from app.core.routine import step_for_offset
from app.schemas import (
    ALWAYS_RECOMMENDED,
    DailyPlan,
    HistoryEntry,
    Product,
    RecommendedProduct,
    RoutineStep,
    ShelfItem,
)


def is_recommended(product: Product, step: RoutineStep) -> bool:
    return product.type in step.target_types or product.type in ALWAYS_RECOMMENDED


def available_products(
    all_products: Sequence[Product],
    history: Sequence[HistoryEntry],
    today: dt.date,
) -> list[Product]:
    """Products off cooldown, in catalog order."""
    return [p for p in all_products if evaluate_cooldown(p, history, today).eligible]


def recommend(
    all_products: Sequence[Product],
    history: Sequence[HistoryEntry],
    start_date: dt.date,
    today: dt.date,
) -> DailyPlan:
    days_passed = (today - start_date).days
    current_step = step_for_offset(days_passed)

    ranked = [
        RecommendedProduct(product=p, is_recommended=is_recommended(p, current_step))
        for p in available_products(all_products, history, today)
    ]
    # Recommended first; catalog order is kept inside each group
    ordered = [r for r in ranked if r.is_recommended] + [r for r in ranked if not r.is_recommended]

    return DailyPlan(
        today=today,
        start_date=start_date,
        days_passed=days_passed,
        current_step=current_step,
        products=ordered,
    )


def shelf_status(
    products: Sequence[Product],
    history: Sequence[HistoryEntry],
    today: dt.date,
) -> list[ShelfItem]:
    """Every product with its cooldown status, in catalog order."""
    items = []
    for product in products:
        status = evaluate_cooldown(product, history, today)
        items.append(
            ShelfItem(
                product=product,
                status=status,
                status_label=status.label,
                last_used=last_used_on(product.id, history),
            )
        )
    return items
