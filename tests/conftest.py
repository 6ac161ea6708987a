from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.time_clock.time_clock.core.enums import Role
from src.time_clock.time_clock.users.memory_user_repository import InMemoryUserRepository
from src.time_clock.time_clock.users.model import User


class FixedClock:
    """Clock that only moves when the test says so."""

    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = now

    def advance(self, **kwargs) -> datetime:
        self._now = self._now + timedelta(**kwargs)
        return self._now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def users_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository(
        [
            User(user_id="123", name="Anna", role=Role.NON_ADMINISTRATOR),
            User(user_id="1234", name="Bob", role=Role.ADMINISTRATOR),
            User(user_id="987654321", name="Charlie", role=Role.NON_ADMINISTRATOR),
        ]
    )
