"""SQLAlchemy model mirroring the browser-style key/value layout."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String, Text, func

from .session import Base


class StoreEntry(Base):
    """One top-level record (users, diaries, currentUser, stats) as JSON text."""

    __tablename__ = "store_entries"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
