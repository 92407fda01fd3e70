"""Key/value store backed by a single SQLAlchemy table."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterator, Optional
import logging

from sqlalchemy import delete, select

from timediary.db.models import StoreEntry
from timediary.db.session import get_session

logger = logging.getLogger(__name__)


class SQLKeyValueStore:
    """get/set helpers wrapping the SQLAlchemy session."""

    def __init__(self, *, create_tables: bool = False) -> None:
        if create_tables:
            from timediary.db.create_tables import create_all

            create_all()

    def get(self, key: str) -> Optional[str]:
        with get_session() as session:
            entry = session.get(StoreEntry, key)
            return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        with get_session() as session:
            entry = session.get(StoreEntry, key)
            if not entry:
                session.add(StoreEntry(key=key, value=value, updated_at=now))
            else:
                entry.value = value
                entry.updated_at = now
            session.commit()
        logger.debug("Wrote key %s to SQL store", key)

    def delete(self, key: str) -> None:
        with get_session() as session:
            session.execute(delete(StoreEntry).where(StoreEntry.key == key))
            session.commit()

    def keys(self) -> Iterator[str]:
        with get_session() as session:
            names = session.execute(select(StoreEntry.key).order_by(StoreEntry.key)).scalars().all()
        return iter(names)
