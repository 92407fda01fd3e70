"""
Guarded JSON codec for the top-level records.

Stored values are JSON text. Anything that fails to parse, or parses to the
wrong top-level shape, is reported as absent so the caller can fall back to
its defaults.
"""

from __future__ import annotations

from typing import Any
import json
import logging

from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

USERS_KEY = "users"
DIARIES_KEY = "diaries"
CURRENT_USER_KEY = "currentUser"
STATS_KEY = "stats"

ALL_KEYS = (USERS_KEY, DIARIES_KEY, CURRENT_USER_KEY, STATS_KEY)

_MISSING = object()


def read_record(store: KeyValueStore, key: str, expected: type | tuple[type, ...] | None = None) -> Any:
    """
    Return the decoded value stored under key, or _MISSING when the key is
    absent, malformed, or not an instance of expected.
    """
    raw = store.get(key)
    if raw is None:
        return _MISSING
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("Record %r is not valid JSON, ignoring it: %s", key, exc)
        return _MISSING
    if expected is not None and not isinstance(value, expected):
        logger.warning("Record %r has unexpected shape %s, ignoring it", key, type(value).__name__)
        return _MISSING
    return value


def is_missing(value: Any) -> bool:
    return value is _MISSING


def write_record(store: KeyValueStore, key: str, value: Any) -> str:
    raw = json.dumps(value, ensure_ascii=False)
    store.set(key, raw)
    return raw
