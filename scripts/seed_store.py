#!/usr/bin/env python3
"""
Seed the configured store with the default diaries, users, stats and an
anonymous session. With --reset the four records are cleared first (the only
destroy path; the app itself never deletes anything).

Usage:
  python scripts/seed_store.py [--reset]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# 直接运行脚本时确保可以导入 timediary 包
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timediary.core.config import get_settings
from timediary.repositories.kv_store import build_store
from timediary.repositories.records import ALL_KEYS
from timediary.services.site_service import SiteService


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed the diary store with defaults")
    ap.add_argument("--reset", action="store_true", help="Clear users/diaries/currentUser/stats first")
    args = ap.parse_args()

    settings = get_settings()
    store = build_store(settings)
    if args.reset:
        for key in ALL_KEYS:
            store.delete(key)
        print(f"Cleared {', '.join(ALL_KEYS)}")

    site = SiteService.from_store(store)
    site.initialize()
    snapshot = site.snapshot()
    users = site.identity.users.list_users()
    print(
        f"Store ({settings.storage_backend}) ready: {len(snapshot['diaries'])} diaries, "
        f"{len(users)} users, stats={snapshot['stats']}"
    )


if __name__ == "__main__":
    main()
