"""
Content repository: the diary collection and its nested comments.

The repository owns an in-memory snapshot of the collection. Reads are served
from the snapshot; every mutation re-reads the store, applies the change and
writes the whole collection back (last writer wins), then replaces the
snapshot.
"""
from __future__ import annotations

from typing import Optional
import copy
import logging
import threading

from timediary.core.utils import new_id, now_iso
from timediary.domain.defaults import default_diaries
from timediary.domain.models import Comment, Diary, RecordError, User

from .kv_store import KeyValueStore
from .records import DIARIES_KEY, is_missing, read_record, write_record

logger = logging.getLogger(__name__)


class DiaryRepository:
    """Read/append access to diaries. No delete or edit operations exist."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._lock = threading.RLock()
        self._snapshot: Optional[list[Diary]] = None

    # -------------------------- persistence --------------------------
    def _read_store(self) -> list[Diary]:
        raw = read_record(self.store, DIARIES_KEY, list)
        if not is_missing(raw):
            try:
                return [Diary.from_dict(item) for item in raw]
            except RecordError as exc:
                logger.warning("Stored diaries are malformed (%s); re-seeding defaults", exc)
        diaries = default_diaries()
        self._write_store(diaries)
        logger.info("Seeded %d default diaries", len(diaries))
        return diaries

    def _write_store(self, diaries: list[Diary]) -> None:
        write_record(self.store, DIARIES_KEY, [d.to_dict() for d in diaries])

    def _diaries(self) -> list[Diary]:
        if self._snapshot is None:
            self._snapshot = self._read_store()
        return self._snapshot

    def refresh(self) -> None:
        """Drop the snapshot so the next read goes back to the store."""
        with self._lock:
            self._snapshot = None

    # -------------------------- reads --------------------------
    # Callers get deep copies; the snapshot only changes through the mutations below.
    def all(self) -> list[Diary]:
        with self._lock:
            return copy.deepcopy(self._diaries())

    def get_by_id(self, diary_id: str) -> Optional[Diary]:
        with self._lock:
            for diary in self._diaries():
                if diary.id == diary_id:
                    return copy.deepcopy(diary)
        return None

    def get_by_category(self, category: str) -> list[Diary]:
        with self._lock:
            return copy.deepcopy([d for d in self._diaries() if d.category == category])

    def latest(self, limit: int = 3) -> list[Diary]:
        """First `limit` diaries in storage order."""
        with self._lock:
            return copy.deepcopy(self._diaries()[: max(0, limit)])

    def popular(self, limit: int = 4) -> list[Diary]:
        """Most viewed first; ties keep storage order."""
        with self._lock:
            ranked = sorted(self._diaries(), key=lambda d: d.views, reverse=True)
            return copy.deepcopy(ranked[: max(0, limit)])

    # -------------------------- mutations --------------------------
    def increment_views(self, diary_id: str) -> None:
        with self._lock:
            diaries = self._read_store()
            for diary in diaries:
                if diary.id == diary_id:
                    diary.views += 1
                    self._write_store(diaries)
                    self._snapshot = diaries
                    return
            logger.debug("increment_views ignored unknown diary %s", diary_id)

    def add_comment(self, diary_id: str, user: User, content: str) -> bool:
        """
        Append a comment with a snapshot of the author's username/avatar.

        Returns False (store untouched) when diary_id does not resolve.
        """
        with self._lock:
            diaries = self._read_store()
            target = next((d for d in diaries if d.id == diary_id), None)
            if target is None:
                return False
            comment = Comment(
                id=new_id({c.id for c in target.comments}),
                diary_id=diary_id,
                user_id=user.id,
                username=user.username,
                avatar=user.avatar,
                content=content,
                created_at=now_iso(),
            )
            target.comments.append(comment)
            self._write_store(diaries)
            self._snapshot = diaries
        logger.info("User %s commented on diary %s", user.username, diary_id)
        return True
