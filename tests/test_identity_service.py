from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# 确保本地运行测试时可以导入 timediary 包
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timediary.repositories.kv_store import MemoryStore  # noqa: E402
from timediary.repositories.user_repository import UserRepository  # noqa: E402
from timediary.services.identity_service import (  # noqa: E402
    IdentityService,
    InvalidUsernameError,
    UnknownUserError,
    UsernameTakenError,
)
from timediary.services.session_service import SessionService  # noqa: E402
from timediary.services.stats_service import StatsProvider  # noqa: E402


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def svc(store):
    return IdentityService(
        users=UserRepository(store),
        sessions=SessionService(store),
        stats=StatsProvider(store),
    )


def test_register_twice_is_rejected_as_duplicate(svc):
    user = svc.register("alice")
    assert user.username == "alice"
    svc.logout()
    with pytest.raises(UsernameTakenError):
        svc.register("alice")


def test_login_unknown_then_after_register(svc):
    with pytest.raises(UnknownUserError):
        svc.login("bob")
    created = svc.register("bob")
    svc.logout()
    assert svc.login("bob").id == created.id
    assert svc.current_user().id == created.id


def test_register_sets_session_and_bumps_total_users(store, svc):
    user = svc.register("  carol  ")
    assert user.username == "carol"
    assert json.loads(store.get("currentUser"))["id"] == user.id
    assert json.loads(store.get("stats"))["totalUsers"] == 5001
    assert [u.username for u in UserRepository(store).list_users()] == ["时光行者", "carol"]


def test_usernames_are_case_sensitive(svc):
    svc.register("Dora")
    assert svc.register("dora").username == "dora"
    with pytest.raises(UnknownUserError):
        svc.login("DORA")


def test_blank_username_is_rejected(svc):
    with pytest.raises(InvalidUsernameError):
        svc.register("   ")
    with pytest.raises(UnknownUserError):
        svc.login("")


def test_seeded_author_can_log_in(svc):
    assert svc.login("时光行者").id == "1"


def test_logout_always_succeeds(store, svc):
    svc.logout()
    svc.register("eve")
    svc.logout()
    assert svc.current_user() is None
    assert store.get("currentUser") == "null"


def test_malformed_session_reads_as_anonymous(store, svc):
    store.set("currentUser", '{"id": 1}')
    assert svc.current_user() is None
    store.set("currentUser", "garbage")
    assert svc.current_user() is None
    assert store.get("currentUser") == "garbage"


def test_stats_baseline_when_users_counter_unset(store, svc):
    store.set("stats", json.dumps({"totalViews": 10}))
    svc.register("frank")
    assert json.loads(store.get("stats")) == {"totalViews": 10, "totalDiaries": 200, "totalUsers": 5001}


def test_reading_session_does_not_write(store, svc):
    assert svc.current_user() is None
    assert store.get("currentUser") is None
    SessionService(store).ensure_initialized()
    assert store.get("currentUser") == "null"


def test_whole_number_float_counters_are_kept(store, svc):
    store.set("stats", json.dumps({"totalViews": 60000.0, "totalDiaries": 210, "totalUsers": 5007.0}))
    svc.register("gina")
    assert json.loads(store.get("stats")) == {"totalViews": 60000, "totalDiaries": 210, "totalUsers": 5008}
