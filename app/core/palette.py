"""Accent colors per product type. Presentation only; nothing in the engine reads this."""

from app.schemas import ProductType

# (dark mode, light mode)
TYPE_COLORS: dict[ProductType, tuple[str, str]] = {
    ProductType.CLEANSER: ("#5E5CE6", "#5E5CE6"),
    ProductType.RECOVERY: ("#00D2BE", "#30D158"),
    ProductType.RETINOL: ("#AF52DE", "#AF52DE"),
    ProductType.ACID: ("#FF9F0A", "#FF9F0A"),
    ProductType.PEELING: ("#FF453A", "#FF453A"),
    ProductType.OTHER: ("#8E8E93", "#8E8E93"),
}

STEP_EXFOLIATION = "#FF9500"
STEP_RECOVERY = "#00D2BE"
STEP_RETINOL = "#AF52DE"
STEP_PEELING = "#FF3B30"


def type_color(product_type: ProductType, dark: bool = True) -> str:
    dark_color, light_color = TYPE_COLORS[product_type]
    return dark_color if dark else light_color
