"""Session pointer helpers (the single `currentUser` record)."""
from __future__ import annotations

from typing import Optional
import logging

from timediary.domain.models import RecordError, User
from timediary.repositories.kv_store import KeyValueStore
from timediary.repositories.records import CURRENT_USER_KEY, is_missing, read_record, write_record

logger = logging.getLogger(__name__)


class SessionService:
    """At most one current user per store; absence means anonymous."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def current_user(self) -> Optional[User]:
        """Return the user held by the session pointer, if any."""
        raw = read_record(self.store, CURRENT_USER_KEY, (dict, type(None)))
        if is_missing(raw) or raw is None:
            return None
        try:
            return User.from_dict(raw)
        except RecordError as exc:
            logger.warning("Stored session is malformed (%s); treating as anonymous", exc)
            return None

    def ensure_initialized(self) -> None:
        """Write an anonymous pointer when the key is absent (startup seeding)."""
        if self.store.get(CURRENT_USER_KEY) is None:
            write_record(self.store, CURRENT_USER_KEY, None)

    def open(self, user: User) -> None:
        write_record(self.store, CURRENT_USER_KEY, user.to_dict())

    def close(self) -> None:
        """Clear the session pointer. Always succeeds."""
        write_record(self.store, CURRENT_USER_KEY, None)
