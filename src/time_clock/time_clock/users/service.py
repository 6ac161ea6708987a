from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.locks import UserLocks
from ..common.validators import require_non_empty
from ..core.enums import Role
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use case: create, read and update user records."""

    def __init__(self, users: UserRepository, *, locks: Optional[UserLocks] = None):
        self._users = users
        self._locks = locks if locks is not None else UserLocks()

    def create_user(self, user_id: str) -> User:
        user_id = require_non_empty(user_id, "User id")
        user = self._users.create(User(user_id=user_id, role=Role.NON_ADMINISTRATOR))
        logger.info("created user %s", user_id)
        return user

    def find_user(self, user_id: str) -> User:
        return self._users.find(user_id)

    def update_user(self, user_id: str, *, name: Optional[str] = None, role: Optional[Role] = None) -> User:
        """None leaves the field unchanged."""

        with self._locks.hold(user_id):
            user = self._users.find(user_id)
            if name is not None:
                user = replace(user, name=name)
            if role is not None:
                user = replace(user, role=role)
            return self._users.update(user)
