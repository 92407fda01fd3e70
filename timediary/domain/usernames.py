"""Domain helpers for username normalization and lookups."""
from __future__ import annotations

from typing import Iterable, Optional

from .models import User


def normalize_username(value: str | None) -> str:
    """Strip surrounding whitespace; the result is compared case-sensitively."""
    return (value or "").strip()


def is_valid_username(value: str | None) -> bool:
    """Return True when the normalized username is non-empty."""
    return bool(normalize_username(value))


def find_by_username(users: Iterable[User], username: str) -> Optional[User]:
    """Exact, case-sensitive match against an already-normalized username."""
    for user in users:
        if user.username == username:
            return user
    return None
