from app.models.db import STATE_ROW_ID, AppState

__all__ = [
    "AppState",
    "STATE_ROW_ID",
]
