from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# 确保本地运行测试时可以导入 timediary 包
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timediary.app import create_app  # noqa: E402
from timediary.core.config import Settings  # noqa: E402
from timediary.repositories.kv_store import MemoryStore  # noqa: E402


@pytest.fixture()
def client(settings):
    app = create_app(store=MemoryStore(), settings=settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        app_env="test",
        log_level="WARNING",
        storage_backend="memory",
        data_file=tmp_path / "data.json",
        database_url="",
        cors_origins=(),
    )


def test_snapshot_on_fresh_store(client):
    resp = client.get("/snapshot")
    assert resp.status_code == 200
    body = resp.json()
    assert body["currentUser"] is None
    assert [d["id"] for d in body["diaries"]] == ["1", "2", "3"]
    assert body["stats"] == {"totalViews": 50000, "totalDiaries": 200, "totalUsers": 5000}
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_enter_and_logout(client):
    resp = client.post("/auth/enter", data={"username": "alice"})
    assert resp.status_code == 200
    assert resp.json()["result"] == "registered"
    assert client.get("/auth/me").json()["currentUser"]["username"] == "alice"

    assert client.post("/auth/logout").json()["currentUser"] is None
    again = client.post("/auth/enter", data={"username": "alice"})
    assert again.json()["result"] == "logged_in"
    assert again.json()["notice"]["message"] == "欢迎回来，alice！"


def test_enter_rejects_blank(client):
    resp = client.post("/auth/enter", data={"username": "  "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "请输入用户名"


def test_open_diary_and_comment(client):
    views = client.get("/diaries/1").json()["diary"]["views"]
    opened = client.post("/diaries/1/open")
    assert opened.json()["diary"]["views"] == views + 1
    assert client.post("/diaries/nope/open").status_code == 404

    anonymous = client.post("/diaries/1/comments", data={"content": "hi"})
    assert anonymous.status_code == 401

    client.post("/auth/enter", data={"username": "bob"})
    assert client.post("/diaries/1/comments", data={"content": " "}).status_code == 400
    assert client.post("/diaries/nope/comments", data={"content": "hi"}).status_code == 404
    posted = client.post("/diaries/1/comments", data={"content": "写得真好"})
    assert posted.status_code == 200
    comments = posted.json()["diary"]["comments"]
    assert comments[-1]["content"] == "写得真好"
    assert comments[-1]["username"] == "bob"


def test_latest_popular_and_categories(client):
    assert [d["id"] for d in client.get("/diaries/latest", params={"limit": 2}).json()["diaries"]] == ["1", "2"]
    assert client.get("/diaries/popular").json()["diaries"][0]["id"] == "3"
    categories = client.get("/categories").json()["categories"]
    assert len(categories) == 8
    browse = client.get("/categories/随笔").json()
    assert [d["id"] for d in browse["diaries"]] == ["2"]
    assert browse["notice"]["message"] == "正在查看「随笔」分类的内容"


def test_stats_endpoint_and_unknown_diary(client):
    assert client.get("/stats").json()["totalUsers"] == 5000
    assert client.get("/diaries/missing").status_code == 404


def test_startup_seeds_store_and_reads_stay_read_only(settings):
    store = MemoryStore()
    with TestClient(create_app(store=store, settings=settings)) as c:
        assert sorted(store.keys()) == ["currentUser", "diaries", "stats", "users"]
        before = {k: store.get(k) for k in store.keys()}
        c.get("/auth/me")
        c.get("/snapshot")
        assert {k: store.get(k) for k in store.keys()} == before


def test_devtools_wellknown_path_is_not_served(client):
    assert client.get("/.well-known/appspecific/com.chrome.devtools.json").status_code == 404
