"""
Configuration helpers for the diary backend.

Exposes a frozen Settings object read from environment variables so that
routers/services never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PACKAGE_DIR = Path(__file__).resolve().parents[1]
STORAGE_BACKENDS = {"json", "sql", "memory"}


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    log_level: str
    storage_backend: str
    data_file: Path
    database_url: str
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _csv(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    database_url = (os.getenv("DATABASE_URL") or "").strip()
    backend = (os.getenv("STORAGE_BACKEND") or "").strip().lower()
    if backend not in STORAGE_BACKENDS:
        backend = "sql" if database_url else "json"

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        storage_backend=backend,
        data_file=Path(os.getenv("DATA_FILE") or PACKAGE_DIR / "data.json"),
        database_url=database_url,
        cors_origins=_csv(os.getenv("CORS_ORIGINS")),
    )
