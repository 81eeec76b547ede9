"""Thread-safe in-memory store of bot users."""

from __future__ import annotations

import threading
from typing import Optional

from .models import User


class UserStore:
    """Keeps users in memory, keyed by their Telegram id."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._lock = threading.RLock()

    def save(self, user: User) -> None:
        """Store or replace a user."""
        with self._lock:
            self._users[user.id] = user

    def get(self, user_id: int) -> Optional[User]:
        """Return the user with this id, or None."""
        with self._lock:
            return self._users.get(user_id)

    def find_matches(self, user_id: int, field: str, level: str) -> list[User]:
        """Return other users who picked the same field and level."""
        with self._lock:
            return [
                user
                for uid, user in self._users.items()
                if uid != user_id and user.field == field and user.level == level
            ]

    def set_field(self, user_id: int, field: str) -> None:
        """Set a known user's field; unknown ids are ignored."""
        with self._lock:
            user = self._users.get(user_id)
            if user is not None:
                user.field = field

    def set_level(self, user_id: int, level: str) -> None:
        """Set a known user's level; unknown ids are ignored."""
        with self._lock:
            user = self._users.get(user_id)
            if user is not None:
                user.level = level