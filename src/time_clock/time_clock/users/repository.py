from __future__ import annotations

from typing import Dict, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete storage.
    Every mutating call is persisted before it returns.
    """

    def create(self, user: User) -> User:
        """Insert a new user.

        Raises UserAlreadyExistsError if the id is taken; the store is left unchanged.
        """

        raise NotImplementedError

    def find(self, user_id: str) -> User:
        """Raises UserNotFoundError if no record has this id."""

        raise NotImplementedError

    def find_all(self) -> Dict[str, User]:
        raise NotImplementedError

    def update(self, user: User) -> User:
        """Replace an existing user. Not an upsert: raises UserNotFoundError."""

        raise NotImplementedError
