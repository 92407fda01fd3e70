"""
Top-level callbacks of the site: what the page used to do on click/submit.

Each callback returns a Notice (the transient message shown to the visitor)
together with the data the page re-renders from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from timediary.domain.defaults import CATEGORIES
from timediary.domain.models import Diary, User
from timediary.domain.usernames import normalize_username
from timediary.repositories.diary_repository import DiaryRepository
from timediary.repositories.kv_store import KeyValueStore
from timediary.repositories.user_repository import UserRepository
from timediary.services.identity_service import (
    IdentityService,
    InvalidUsernameError,
    UnknownUserError,
    UsernameTakenError,
)
from timediary.services.session_service import SessionService
from timediary.services.stats_service import StatsProvider

MSG_USERNAME_REQUIRED = "请输入用户名"
MSG_USERNAME_TAKEN = "用户名已存在，请尝试登录"
MSG_WELCOME_BACK = "欢迎回来，{username}！"
MSG_REGISTERED = "注册成功，欢迎加入时光日记！"
MSG_LOGGED_OUT = "已退出登录"
MSG_LOGIN_REQUIRED = "请先登录后再评论"
MSG_COMMENT_EMPTY = "评论内容不能为空"
MSG_DIARY_NOT_FOUND = "日记不存在"
MSG_COMMENT_POSTED = "评论发表成功！"
MSG_BROWSE_CATEGORY = "正在查看「{category}」分类的内容"


@dataclass(frozen=True)
class Notice:
    level: str  # success | error | info
    message: str

    def to_dict(self) -> dict:
        return {"level": self.level, "message": self.message}


class EntryKind(str, Enum):
    LOGGED_IN = "logged_in"
    REGISTERED = "registered"
    REJECTED = "rejected"


@dataclass
class EntryResult:
    kind: EntryKind
    notice: Notice
    user: Optional[User] = None

    @property
    def ok(self) -> bool:
        return self.kind is not EntryKind.REJECTED


class CommentStatus(str, Enum):
    POSTED = "posted"
    LOGIN_REQUIRED = "login_required"
    EMPTY = "empty"
    NOT_FOUND = "not_found"


@dataclass
class CommentResult:
    status: CommentStatus
    notice: Notice
    diary: Optional[Diary] = None

    @property
    def ok(self) -> bool:
        return self.status is CommentStatus.POSTED


@dataclass
class CategoryView:
    category: str
    notice: Notice
    diaries: list[Diary] = field(default_factory=list)


@dataclass
class SiteService:
    """Wires identity, content and stats for one store (one visitor profile)."""

    identity: IdentityService
    diaries: DiaryRepository
    stats: StatsProvider

    @classmethod
    def from_store(cls, store: KeyValueStore) -> "SiteService":
        stats = StatsProvider(store)
        identity = IdentityService(
            users=UserRepository(store),
            sessions=SessionService(store),
            stats=stats,
        )
        return cls(identity=identity, diaries=DiaryRepository(store), stats=stats)

    def initialize(self) -> None:
        """Seed every absent record: diaries, users, stats, anonymous session."""
        self.diaries.all()
        self.identity.users.list_users()
        self.stats.get()
        self.identity.sessions.ensure_initialized()

    # -------------------------------------- identity --------------------------------------
    def enter(self, username: str) -> EntryResult:
        """Log in when the username exists, otherwise register it."""
        name = normalize_username(username)
        if not name:
            return EntryResult(EntryKind.REJECTED, Notice("error", MSG_USERNAME_REQUIRED))
        try:
            user = self.identity.login(name)
            return EntryResult(EntryKind.LOGGED_IN, Notice("success", MSG_WELCOME_BACK.format(username=name)), user)
        except UnknownUserError:
            pass
        try:
            user = self.identity.register(name)
        except InvalidUsernameError:
            return EntryResult(EntryKind.REJECTED, Notice("error", MSG_USERNAME_REQUIRED))
        except UsernameTakenError:
            # only reachable when another writer registered the name in between
            return EntryResult(EntryKind.REJECTED, Notice("error", MSG_USERNAME_TAKEN))
        return EntryResult(EntryKind.REGISTERED, Notice("success", MSG_REGISTERED), user)

    def logout(self) -> Notice:
        self.identity.logout()
        return Notice("success", MSG_LOGGED_OUT)

    def current_user(self) -> Optional[User]:
        return self.identity.current_user()

    # -------------------------------------- diaries --------------------------------------
    def open_diary(self, diary_id: str) -> Optional[Diary]:
        """Count a view and return the updated diary (None when unknown)."""
        self.diaries.increment_views(diary_id)
        return self.diaries.get_by_id(diary_id)

    def add_comment(self, diary_id: str, content: str) -> CommentResult:
        user = self.identity.current_user()
        if not user:
            return CommentResult(CommentStatus.LOGIN_REQUIRED, Notice("error", MSG_LOGIN_REQUIRED))
        text = (content or "").strip()
        if not text:
            return CommentResult(CommentStatus.EMPTY, Notice("error", MSG_COMMENT_EMPTY))
        if not self.diaries.add_comment(diary_id, user, text):
            return CommentResult(CommentStatus.NOT_FOUND, Notice("error", MSG_DIARY_NOT_FOUND))
        return CommentResult(
            CommentStatus.POSTED,
            Notice("success", MSG_COMMENT_POSTED),
            self.diaries.get_by_id(diary_id),
        )

    # -------------------------------------- categories --------------------------------------
    def categories(self) -> list[dict]:
        return [c.to_dict(count=len(self.diaries.get_by_category(c.name))) for c in CATEGORIES]

    def browse_category(self, category: str) -> CategoryView:
        name = (category or "").strip()
        return CategoryView(
            category=name,
            notice=Notice("info", MSG_BROWSE_CATEGORY.format(category=name)),
            diaries=self.diaries.get_by_category(name),
        )

    # -------------------------------------- snapshot --------------------------------------
    def snapshot(self) -> dict:
        user = self.identity.current_user()
        return {
            "currentUser": user.to_dict() if user else None,
            "diaries": [d.to_dict() for d in self.diaries.all()],
            "stats": self.stats.get().to_dict(),
        }
