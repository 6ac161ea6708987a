from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List, Optional

from ..core.exceptions import AccessDeniedError
from ..users.model import User
from ..users.repository import UserRepository
from .model import ReportDataFilters

logger = logging.getLogger(__name__)

UserPredicate = Callable[[User], bool]


def _starts_within(start: datetime, *, before: Optional[datetime], after: Optional[datetime]) -> bool:
    if before is not None and not start < before:
        return False
    if after is not None and not start > after:
        return False
    return True


class ActivityReportService:
    """Use case: administrator-only activity report over all users."""

    def __init__(self, users: UserRepository):
        self._users = users

    def find_user_activity(self, admin_user_id: str, filters: ReportDataFilters) -> Dict[str, User]:
        admin = self._users.find(admin_user_id)
        if not admin.is_administrator:
            raise AccessDeniedError()

        predicates = self._predicates(filters)
        # Thresholds see the full history; pruning happens afterwards.
        selected = {
            user_id: user
            for user_id, user in self._users.find_all().items()
            if all(p(user) for p in predicates)
        }

        report = {user_id: self._prune(user, filters) for user_id, user in selected.items()}
        logger.info("activity report for %s: %d users matched", admin_user_id, len(report))
        return report

    @staticmethod
    def _predicates(filters: ReportDataFilters) -> List[UserPredicate]:
        return [
            lambda u: filters.user_id_to_view is None or u.user_id == filters.user_id_to_view,
            lambda u: filters.role_to_view is None or u.role == filters.role_to_view,
            lambda u: len(u.prior_work_shifts) >= filters.prior_work_shifts_threshold,
            lambda u: len(u.prior_breaks) >= filters.prior_breaks_threshold,
            lambda u: not filters.is_currently_on_break or u.is_on_break,
            lambda u: not filters.is_currently_on_lunch or u.is_on_lunch,
        ]

    @staticmethod
    def _prune(user: User, filters: ReportDataFilters) -> User:
        shifts = tuple(
            s
            for s in user.prior_work_shifts
            if _starts_within(s.start_time, before=filters.shift_begins_before, after=filters.shift_begins_after)
        )
        breaks = tuple(
            b
            for b in user.prior_breaks
            if _starts_within(b.start_time, before=filters.break_begins_before, after=filters.break_begins_after)
        )
        return replace(user, prior_work_shifts=shifts, prior_breaks=breaks)
