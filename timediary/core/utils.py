"""
Utility helpers shared across repositories/services.
"""

from datetime import datetime, timezone
from typing import Container
import secrets


def new_id(taken: Container[str] = ()) -> str:
    """
    生成短的不透明 id，并避开集合中已使用的 id。
    """
    while True:
        candidate = secrets.token_hex(5)[:9]
        if candidate not in taken:
            return candidate


def today_str() -> str:
    """Current date as YYYY-MM-DD (used for User.createdAt)."""
    return datetime.now(timezone.utc).date().isoformat()


def now_iso() -> str:
    """Current UTC timestamp with millisecond precision and a trailing Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
