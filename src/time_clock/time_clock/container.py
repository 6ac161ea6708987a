from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.datetime_utils import Clock
from .common.locks import UserLocks
from .core.exceptions import ValidationError
from .reports.service import ActivityReportService
from .storage.bootstrap import build_default_users, ensure_database
from .storage.json_file import JsonFileDatabase, StoreConfig, resolve_path
from .timeclock.service import TimeClockService
from .users.json_user_repository import JsonUserRepository
from .users.memory_user_repository import InMemoryUserRepository
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    clock: Clock
    user_locks: UserLocks

    user_service: UserService
    time_clock_service: TimeClockService
    activity_report_service: ActivityReportService


def storage_backend(store_config: dict) -> str:
    return str(store_config.get("backend") or "json").strip().lower()


def _build_users_repo(store_config: dict) -> UserRepository:
    backend = storage_backend(store_config)
    seed = bool(store_config.get("seed_default_users", True))

    if backend == "memory":
        return InMemoryUserRepository(build_default_users() if seed else ())

    if backend == "json":
        database = JsonFileDatabase.get_instance(StoreConfig(path=resolve_path(store_config.get("path"))))
        ensure_database(database, seed_default_users=seed)
        return JsonUserRepository(database)

    raise ValidationError(f"Unknown storage backend: {backend}")


def build_container(*, store_config: dict, clock: Optional[Clock] = None) -> Container:
    clock = clock or Clock()
    users_repo = _build_users_repo(store_config)

    # Shared so renames and shift/break transitions on one user never interleave.
    user_locks = UserLocks()
    user_service = UserService(users_repo, locks=user_locks)
    time_clock_service = TimeClockService(users_repo, clock=clock, locks=user_locks)
    activity_report_service = ActivityReportService(users_repo)

    return Container(
        users_repo=users_repo,
        clock=clock,
        user_locks=user_locks,
        user_service=user_service,
        time_clock_service=time_clock_service,
        activity_report_service=activity_report_service,
    )
