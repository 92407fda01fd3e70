"""Domain records and their persisted (camelCase JSON) form."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


class RecordError(ValueError):
    """Raised when a stored mapping cannot be turned into a domain record."""


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise RecordError(f"field '{key}' must be a string")
    return value


def _integer(value: Any, key: str) -> int:
    """Accept ints and whole-number floats (JSON writers may emit 1234.0)."""
    if isinstance(value, bool):
        raise RecordError(f"field '{key}' must be an integer")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise RecordError(f"field '{key}' must be an integer")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RecordError(f"field '{key}' must be a string")
    return value


@dataclass
class User:
    id: str
    username: str
    created_at: str
    avatar: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        if not isinstance(data, Mapping):
            raise RecordError("user record must be an object")
        return cls(
            id=_require_str(data, "id"),
            username=_require_str(data, "username"),
            created_at=_require_str(data, "createdAt"),
            avatar=_optional_str(data, "avatar"),
        )

    def to_dict(self) -> dict:
        out = {"id": self.id, "username": self.username}
        if self.avatar is not None:
            out["avatar"] = self.avatar
        out["createdAt"] = self.created_at
        return out


@dataclass
class Comment:
    id: str
    diary_id: str
    user_id: str
    username: str
    content: str
    created_at: str
    avatar: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Comment":
        if not isinstance(data, Mapping):
            raise RecordError("comment record must be an object")
        return cls(
            id=_require_str(data, "id"),
            diary_id=_require_str(data, "diaryId"),
            user_id=_require_str(data, "userId"),
            username=_require_str(data, "username"),
            content=_require_str(data, "content"),
            created_at=_require_str(data, "createdAt"),
            avatar=_optional_str(data, "avatar"),
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "diaryId": self.diary_id,
            "userId": self.user_id,
            "username": self.username,
        }
        if self.avatar is not None:
            out["avatar"] = self.avatar
        out["content"] = self.content
        out["createdAt"] = self.created_at
        return out


@dataclass
class Diary:
    id: str
    title: str
    content: str
    excerpt: str
    cover_image: str
    category: str
    date: str
    author: str
    views: int = 0
    comments: list[Comment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Diary":
        if not isinstance(data, Mapping):
            raise RecordError("diary record must be an object")
        views = _integer(data.get("views", 0), "views")
        if views < 0:
            raise RecordError("field 'views' must be a non-negative integer")
        comments = data.get("comments", [])
        if not isinstance(comments, list):
            raise RecordError("field 'comments' must be a list")
        return cls(
            id=_require_str(data, "id"),
            title=_require_str(data, "title"),
            content=_require_str(data, "content"),
            excerpt=_require_str(data, "excerpt"),
            cover_image=_require_str(data, "coverImage"),
            category=_require_str(data, "category"),
            date=_require_str(data, "date"),
            author=_require_str(data, "author"),
            views=views,
            comments=[Comment.from_dict(c) for c in comments],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "excerpt": self.excerpt,
            "coverImage": self.cover_image,
            "category": self.category,
            "date": self.date,
            "views": self.views,
            "comments": [c.to_dict() for c in self.comments],
            "author": self.author,
        }


@dataclass
class Stats:
    """Display-only counters; never recomputed from the collections."""

    total_views: int
    total_diaries: int
    total_users: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], defaults: "Stats") -> "Stats":
        if not isinstance(data, Mapping):
            raise RecordError("stats record must be an object")

        def _count(key: str, fallback: int) -> int:
            value = data.get(key)
            if value is None:
                return fallback
            return _integer(value, key)

        return cls(
            total_views=_count("totalViews", defaults.total_views),
            total_diaries=_count("totalDiaries", defaults.total_diaries),
            total_users=_count("totalUsers", defaults.total_users),
        )

    def to_dict(self) -> dict:
        return {
            "totalViews": self.total_views,
            "totalDiaries": self.total_diaries,
            "totalUsers": self.total_users,
        }


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str
    image: str

    def to_dict(self, count: int = 0) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "image": self.image,
            "count": count,
        }
