"""
SQLAlchemy models — one table only.

`app_state` has a single row with the shelf, the usage log and the settings.
Products and history are JSON blobs in the record shape the store contract
describes; the repository validates them on the way out.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String
from sqlalchemy.sql import func

from app.database import Base

STATE_ROW_ID = 1


class AppState(Base):
    __tablename__ = "app_state"

    id = Column(Integer, primary_key=True, autoincrement=False, default=STATE_ROW_ID)
    products_json = Column(JSON, default=list)
    history_json = Column(JSON, default=list)
    start_date = Column(String(10))
    is_dark_theme = Column(Boolean)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<AppState(id={self.id}, start={self.start_date})>"
