"""User table stored under the `users` key."""
from __future__ import annotations

from typing import Optional
import logging
import threading

from timediary.domain.defaults import default_users
from timediary.domain.models import RecordError, User
from timediary.domain.usernames import find_by_username

from .kv_store import KeyValueStore
from .records import USERS_KEY, is_missing, read_record, write_record

logger = logging.getLogger(__name__)


class UserRepository:
    """CRUD-less helpers for the users array: lookups and append only."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._lock = threading.RLock()

    def _load(self) -> list[User]:
        raw = read_record(self.store, USERS_KEY, list)
        if not is_missing(raw):
            try:
                return [User.from_dict(item) for item in raw]
            except RecordError as exc:
                logger.warning("Stored users are malformed (%s); re-seeding defaults", exc)
        users = default_users()
        self._save(users)
        return users

    def _save(self, users: list[User]) -> None:
        write_record(self.store, USERS_KEY, [u.to_dict() for u in users])

    def list_users(self) -> list[User]:
        with self._lock:
            return self._load()

    def find_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return find_by_username(self._load(), username)

    def ids(self) -> set[str]:
        with self._lock:
            return {u.id for u in self._load()}

    def add(self, user: User) -> User:
        """Append a user; callers check username uniqueness under the same lock."""
        with self._lock:
            users = self._load()
            users.append(user)
            self._save(users)
            return user

    @property
    def lock(self) -> threading.RLock:
        return self._lock
