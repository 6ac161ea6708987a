from __future__ import annotations

import threading
from typing import Dict, Iterable, Optional

from ..core.exceptions import UserAlreadyExistsError, UserNotFoundError
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Process-local store. Nothing survives a restart."""

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: Dict[str, User] = {u.user_id: u for u in users or ()}
        self._lock = threading.RLock()

    def create(self, user: User) -> User:
        with self._lock:
            if user.user_id in self._users:
                raise UserAlreadyExistsError(f"User {user.user_id} already exists")
            self._users[user.user_id] = user
        return user

    def find(self, user_id: str) -> User:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    def find_all(self) -> Dict[str, User]:
        with self._lock:
            return dict(self._users)

    def update(self, user: User) -> User:
        with self._lock:
            if user.user_id not in self._users:
                raise UserNotFoundError(f"User {user.user_id} not found")
            self._users[user.user_id] = user
        return user
