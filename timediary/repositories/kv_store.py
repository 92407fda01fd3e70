"""
Key/value persistence backends.

Every backend stores opaque strings under a small set of top-level keys, the
same way the browser build kept them in local storage. There is no atomicity
across keys and no merge: the last write of a key wins.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Protocol
import json
import logging
import os
import tempfile
import threading

from timediary.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self) -> Iterator[str]: ...


class MemoryStore:
    """Process-local store, used by tests and ephemeral runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))


_PATH_LOCKS: dict[Path, threading.RLock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    """One lock per resolved file, shared by every JsonFileStore on that path."""
    key = path.resolve()
    with _PATH_LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(key, threading.RLock())


class JsonFileStore:
    """
    Single JSON file mapping key -> string value.

    A missing file reads as empty. An unreadable or malformed file also reads as
    empty (logged), so callers re-seed defaults instead of crashing. Every
    operation holds the per-file lock, and writes go through a temp file that
    replaces the original, so readers never see a partial file.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Store file %s unreadable, treating as empty: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s does not hold an object, treating as empty", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)
        logger.debug("Wrote key %s to %s", key, self.path)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._save(data)

    def keys(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._load()))


def copy_store(source: KeyValueStore, target: KeyValueStore) -> list[str]:
    """Copy every key verbatim from source to target; returns the keys written."""
    copied: list[str] = []
    for key in source.keys():
        value = source.get(key)
        if value is None:
            continue
        target.set(key, value)
        copied.append(key)
    return copied


def build_store(settings: Settings | None = None) -> KeyValueStore:
    """Pick the backend named by STORAGE_BACKEND (json, sql or memory)."""
    settings = settings or get_settings()
    if settings.storage_backend == "memory":
        return MemoryStore()
    if settings.storage_backend == "sql":
        from timediary.repositories.sql_store import SQLKeyValueStore

        return SQLKeyValueStore(create_tables=True)
    return JsonFileStore(settings.data_file)
