from __future__ import annotations

from typing import Dict

from ..core.exceptions import StorageUnavailableError, UserAlreadyExistsError, UserNotFoundError
from ..storage.json_file import JsonFileDatabase, db_snapshot, db_transaction
from .codec import user_from_dict, user_to_dict
from .model import User
from .repository import UserRepository


class JsonUserRepository(UserRepository):
    def __init__(self, database: JsonFileDatabase):
        self._database = database

    def create(self, user: User) -> User:
        with db_transaction(self._database) as records:
            if user.user_id in records:
                raise UserAlreadyExistsError(f"User {user.user_id} already exists")
            records[user.user_id] = user_to_dict(user)
        return user

    def find(self, user_id: str) -> User:
        with db_snapshot(self._database) as records:
            if user_id not in records:
                raise UserNotFoundError(f"User {user_id} not found")
            row = records[user_id]
        return self._to_user(user_id, row)

    def find_all(self) -> Dict[str, User]:
        with db_snapshot(self._database) as records:
            return {user_id: self._to_user(user_id, row) for user_id, row in records.items()}

    def update(self, user: User) -> User:
        with db_transaction(self._database) as records:
            if user.user_id not in records:
                raise UserNotFoundError(f"User {user.user_id} not found")
            records[user.user_id] = user_to_dict(user)
        return user

    @staticmethod
    def _to_user(user_id: str, row) -> User:
        if not isinstance(row, dict):
            raise StorageUnavailableError(f"Corrupt record for user {user_id}: expected an object")
        try:
            return user_from_dict(row)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise StorageUnavailableError(f"Corrupt record for user {user_id}: {exc}") from exc
