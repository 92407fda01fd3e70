"""
Smoke tests for the SQL key/value store against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# 确保本地运行测试时可以导入 timediary 包
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timediary.core import config as core_config  # noqa: E402
from timediary.db import models  # noqa: E402
from timediary.db import session as db_session  # noqa: E402
from timediary.db.create_tables import create_all  # noqa: E402
from timediary.repositories.sql_store import SQLKeyValueStore  # noqa: E402
from timediary.services.site_service import SiteService  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """配置临时 SQLite 并在结束时彻底清理，避免 Windows 上文件被占用。"""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    # 清空缓存，强制重新读取环境变量
    core_config.get_settings.cache_clear()
    db_session.reset_engine()

    assert "store_entries" in create_all()

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=db_session.get_engine())
    except Exception:
        pass
    db_session.reset_engine()
    core_config.get_settings.cache_clear()


def test_get_set_and_overwrite(temp_db):
    store = SQLKeyValueStore()
    assert store.get("stats") is None
    store.set("stats", '{"totalUsers": 5000}')
    store.set("stats", '{"totalUsers": 5001}')
    assert store.get("stats") == '{"totalUsers": 5001}'
    assert list(store.keys()) == ["stats"]
    store.delete("stats")
    assert store.get("stats") is None


def test_services_run_on_sql_backend(temp_db):
    site = SiteService.from_store(SQLKeyValueStore())
    result = site.enter("alice")
    assert result.user is not None
    assert site.add_comment("1", "来自 SQL 的评论").ok

    reloaded = SiteService.from_store(SQLKeyValueStore())
    assert reloaded.current_user().username == "alice"
    assert reloaded.diaries.get_by_id("1").comments[-1].content == "来自 SQL 的评论"
    assert reloaded.stats.get().total_users == 5001


def test_missing_database_url_is_a_configuration_error(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    core_config.get_settings.cache_clear()
    db_session.reset_engine()
    try:
        with pytest.raises(RuntimeError):
            SQLKeyValueStore().get("users")
    finally:
        core_config.get_settings.cache_clear()
        db_session.reset_engine()
