"""
Pydantic schemas — the single source of truth for all data contracts.

Stored records use the camelCase field names of the persisted shape
(`cooldownDays`, `dayTitle`, `productsUsedIds`); Python code uses the
snake_case attribute names. Both are accepted on input.
"""

from __future__ import annotations

import datetime as dt
import enum
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Enums ────────────────────────────────────────────────────────────────────


class ProductType(str, enum.Enum):
    CLEANSER = "cleanser"
    RECOVERY = "recovery"
    RETINOL = "retinol"
    ACID = "acid"
    PEELING = "peeling"
    OTHER = "other"

    @property
    def label(self) -> str:
        return PRODUCT_TYPE_LABELS[self]


PRODUCT_TYPE_LABELS: dict[ProductType, str] = {
    ProductType.CLEANSER: "Cleanser",
    ProductType.RECOVERY: "Recovery",
    ProductType.RETINOL: "Retinol",
    ProductType.ACID: "Acids",
    ProductType.PEELING: "Peeling",
    ProductType.OTHER: "Other",
}

# Emphasized every day, whatever the routine step targets
ALWAYS_RECOMMENDED: frozenset[ProductType] = frozenset(
    {ProductType.CLEANSER, ProductType.RECOVERY}
)


# ── Stored records ───────────────────────────────────────────────────────────


class Product(BaseModel):
    """A product on the shelf. Never edited, only deleted."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(min_length=1)
    type: ProductType
    cooldown_days: int = Field(default=0, ge=0, alias="cooldownDays")


class HistoryEntry(BaseModel):
    """One "save routine" action. `date` is kept as stored, even if malformed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    time: str
    day_title: str = Field(default="", alias="dayTitle")
    products_used_ids: list[str] = Field(default_factory=list, alias="productsUsedIds")


class RoutineStep(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    day_number: str = Field(alias="dayNumber")
    description: str
    target_types: tuple[ProductType, ...] = Field(alias="targetTypes")
    color: str = Field(description="Accent color, e.g. '#FF9500'")


# ── Engine results ───────────────────────────────────────────────────────────


class CooldownStatus(BaseModel):
    eligible: bool
    days_remaining: Optional[int] = Field(
        default=None,
        alias="daysRemaining",
        description="Days (today included) until eligible; only set when not eligible",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def label(self) -> str:
        if self.eligible:
            return "Ready"
        return f"Paused: {self.days_remaining} more day(s)"


class RecommendedProduct(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product: Product
    is_recommended: bool = Field(alias="isRecommended")


class DailyPlan(BaseModel):
    """Everything the dashboard needs for one day."""

    model_config = ConfigDict(populate_by_name=True)

    today: dt.date
    start_date: dt.date = Field(alias="startDate")
    days_passed: int = Field(alias="daysPassed", description="Not clamped; negative before the start date")
    current_step: RoutineStep = Field(alias="currentStep")
    products: list[RecommendedProduct] = Field(default_factory=list)


class ShelfItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product: Product
    status: CooldownStatus
    status_label: str = Field(alias="statusLabel")
    last_used: Optional[dt.date] = Field(default=None, alias="lastUsed")


class HistoryItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entry: HistoryEntry
    display_date: dt.date = Field(alias="displayDate")
    products: list[Product] = Field(default_factory=list)


class AppSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_dark_theme: bool = Field(alias="isDarkTheme")
    start_date: dt.date = Field(alias="startDate")


# ── Requests ─────────────────────────────────────────────────────────────────


class ProductCreate(BaseModel):
    """Add-product form. A non-numeric cooldown becomes 0 instead of an error."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    type: ProductType = ProductType.RECOVERY
    cooldown_days: int = Field(default=0, alias="cooldownDays")

    @field_validator("cooldown_days", mode="before")
    @classmethod
    def _coerce_cooldown(cls, value) -> int:
        try:
            days = int(str(value).strip())
        except (TypeError, ValueError):
            return 0
        return days if days >= 0 else 0

    def to_product(self) -> Product:
        return Product(name=self.name, type=self.type, cooldown_days=self.cooldown_days)


class LogRoutineRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_ids: list[str] = Field(alias="productIds")


class ThemeUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_dark_theme: bool = Field(alias="isDarkTheme")
