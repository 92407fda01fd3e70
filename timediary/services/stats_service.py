"""Display-only counters stored under the `stats` key."""
from __future__ import annotations

import logging
import threading

from timediary.domain.defaults import BASELINE_TOTAL_USERS, default_stats
from timediary.domain.models import RecordError, Stats
from timediary.repositories.kv_store import KeyValueStore
from timediary.repositories.records import STATS_KEY, is_missing, read_record, write_record

logger = logging.getLogger(__name__)


class StatsProvider:
    """
    Seeds 50000/200/5000 once and otherwise returns the persisted record.

    totalViews and totalDiaries are never recalculated from the diary data;
    only totalUsers moves, and only on registration.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._lock = threading.RLock()

    def _load(self) -> Stats:
        defaults = default_stats()
        raw = read_record(self.store, STATS_KEY, dict)
        if not is_missing(raw):
            try:
                return Stats.from_dict(raw, defaults)
            except RecordError as exc:
                logger.warning("Stored stats are malformed (%s); re-seeding defaults", exc)
        write_record(self.store, STATS_KEY, defaults.to_dict())
        return defaults

    def get(self) -> Stats:
        with self._lock:
            return self._load()

    def increment_users(self) -> Stats:
        with self._lock:
            stats = self._load()
            stats.total_users = (stats.total_users or BASELINE_TOTAL_USERS) + 1
            write_record(self.store, STATS_KEY, stats.to_dict())
            return stats
