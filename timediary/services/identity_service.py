"""
Identity use cases: register, login and logout by username.

The username is the whole credential (trust on first use). There is no
password, verification step or rate limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from timediary.core.utils import new_id, today_str
from timediary.domain.models import User
from timediary.domain.usernames import is_valid_username, normalize_username
from timediary.repositories.user_repository import UserRepository
from timediary.services.session_service import SessionService
from timediary.services.stats_service import StatsProvider

logger = logging.getLogger(__name__)


class IdentityError(Exception):
    """Base class for identity-related rejections."""


class InvalidUsernameError(IdentityError):
    pass


class UsernameTakenError(IdentityError):
    def __init__(self, username: str):
        super().__init__(f"Username already registered: {username}")
        self.username = username


class UnknownUserError(IdentityError):
    def __init__(self, username: str):
        super().__init__(f"No user named {username}")
        self.username = username


@dataclass
class IdentityService:
    """Resolves usernames to users and keeps the session pointer."""

    users: UserRepository
    sessions: SessionService
    stats: StatsProvider

    # -------------------------------------- registration --------------------------------------
    def register(self, username: str) -> User:
        name = normalize_username(username)
        if not is_valid_username(name):
            raise InvalidUsernameError("Username is required")
        with self.users.lock:
            if self.users.find_by_username(name):
                raise UsernameTakenError(name)
            user = User(id=new_id(self.users.ids()), username=name, created_at=today_str())
            self.users.add(user)
        self.sessions.open(user)
        self.stats.increment_users()
        logger.info("Registered user %s (%s)", name, user.id)
        return user

    # -------------------------------------- login --------------------------------------
    def login(self, username: str) -> User:
        name = normalize_username(username)
        user = self.users.find_by_username(name) if name else None
        if not user:
            raise UnknownUserError(name)
        self.sessions.open(user)
        logger.info("User %s logged in", name)
        return user

    def logout(self) -> None:
        user = self.sessions.current_user()
        self.sessions.close()
        if user:
            logger.info("User %s logged out", user.username)

    def current_user(self) -> Optional[User]:
        return self.sessions.current_user()
