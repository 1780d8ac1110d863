"""
The 11-day routine cycle.

Day 0 is the stored start date. The table is fixed; nothing mutates it.
"""

from app.core import palette
from app.schemas import ProductType, RoutineStep


def _step(day: int, description: str, color: str, *targets: ProductType) -> RoutineStep:
    return RoutineStep(
        day_number=str(day),
        description=description,
        target_types=targets,
        color=color,
    )


ROUTINE: tuple[RoutineStep, ...] = (
    _step(1, "Exfoliation", palette.STEP_EXFOLIATION, ProductType.ACID, ProductType.CLEANSER),
    _step(2, "Recovery", palette.STEP_RECOVERY, ProductType.RECOVERY),
    _step(3, "Recovery", palette.STEP_RECOVERY, ProductType.RECOVERY),
    _step(4, "Exfoliation", palette.STEP_EXFOLIATION, ProductType.ACID),
    _step(5, "Recovery", palette.STEP_RECOVERY, ProductType.RECOVERY),
    _step(6, "Retinol", palette.STEP_RETINOL, ProductType.RETINOL),
    _step(7, "Recovery", palette.STEP_RECOVERY, ProductType.RECOVERY),
    _step(8, "Recovery", palette.STEP_RECOVERY, ProductType.RECOVERY),
    _step(9, "Exfoliation", palette.STEP_EXFOLIATION, ProductType.ACID),
    _step(10, "Recovery", palette.STEP_RECOVERY, ProductType.RECOVERY),
    _step(11, "Peeling", palette.STEP_PEELING, ProductType.PEELING),
)


def step_count() -> int:
    return len(ROUTINE)


def step_for_offset(days_passed: int) -> RoutineStep:
    """Routine step for a day offset from the start date.

    Negative offsets (start date in the future, clock skew) map to the
    first step rather than wrapping around from the end.
    """
    if days_passed < 0:
        return ROUTINE[0]
    return ROUTINE[days_passed % len(ROUTINE)]
