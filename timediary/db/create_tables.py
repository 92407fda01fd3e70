"""Create the key/value table used by the SQL store backend.

Usage:
  DATABASE_URL=sqlite:///diary.db python -m timediary.db.create_tables
"""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers StoreEntry on Base.metadata


def create_all(engine=None) -> list[str]:
    """Create missing tables and return the names known to the metadata."""
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine, checkfirst=True)
    return sorted(Base.metadata.tables)


if __name__ == "__main__":
    try:
        names = create_all()
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print("Tables ready: " + ", ".join(names))
