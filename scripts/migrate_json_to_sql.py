"""One-off migration script: JSON store file (data.json) -> SQL store."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# 直接运行脚本时确保可以导入 timediary 包
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timediary.core.config import get_settings
from timediary.repositories.kv_store import JsonFileStore, copy_store
from timediary.repositories.sql_store import SQLKeyValueStore


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy a JSON store file into the SQL store")
    ap.add_argument("--file", type=Path, default=settings.data_file, help="JSON store file (default: DATA_FILE)")
    args = ap.parse_args()

    if not args.file.exists():
        raise SystemExit(f"Store file not found: {args.file}")
    if not settings.database_url:
        raise SystemExit("DATABASE_URL must be set")

    copied = copy_store(JsonFileStore(args.file), SQLKeyValueStore(create_tables=True))
    print(f"Migrated {len(copied)} keys: {', '.join(copied) or '-'}")


if __name__ == "__main__":
    main()
