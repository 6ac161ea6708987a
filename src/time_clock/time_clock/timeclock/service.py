from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import Clock
from ..common.locks import UserLocks
from ..core.enums import BreakType
from ..core.exceptions import BreakInProgressError, BreakNotStartedError, ShiftInProgressError, ShiftNotStartedError
from ..users.model import Break, User, WorkShift
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)


class TimeClockService:
    """Shift and break state machine.

    Each call reads the user from the store, checks the one slot relevant to
    the transition, builds the new state, then writes it back.
    """

    def __init__(self, users: UserRepository, *, clock: Optional[Clock] = None, locks: Optional[UserLocks] = None):
        self._users = users
        self._clock = clock or Clock()
        self._locks = locks if locks is not None else UserLocks()

    def start_shift(self, user_id: str) -> None:
        with self._locks.hold(user_id):
            user = self._users.find(user_id)
            if user.is_working:
                raise ShiftInProgressError()

            user = replace(user, current_work_shift=WorkShift(start_time=self._clock.now()))
            self._users.update(user)
        logger.info("user %s started shift", user_id)

    def end_shift(self, user_id: str) -> None:
        with self._locks.hold(user_id):
            user = self._users.find(user_id)
            self._require_working(user)
            if user.is_on_break or user.is_on_lunch:
                raise BreakInProgressError("Cannot end shift while a break is in progress")

            finished = user.current_work_shift.closed(self._clock.now())
            user = replace(
                user,
                current_work_shift=None,
                prior_work_shifts=user.prior_work_shifts + (finished,),
            )
            self._users.update(user)
        logger.info("user %s ended shift", user_id)

    def start_break(self, user_id: str, break_type: BreakType = BreakType.BREAK) -> None:
        with self._locks.hold(user_id):
            user = self._users.find(user_id)
            self._require_working(user)
            if user.break_slot(break_type) is not None:
                raise BreakInProgressError(f"{break_type.value} is already in progress")

            started = Break(break_type=break_type, start_time=self._clock.now())
            if break_type == BreakType.LUNCH:
                user = replace(user, current_lunch_break=started)
            else:
                user = replace(user, current_break=started)
            self._users.update(user)
        logger.info("user %s started %s", user_id, break_type.value)

    def end_break(self, user_id: str) -> None:
        """Close the active break.

        The caller cannot pick which one: a short break is always closed
        before a lunch break.
        """

        with self._locks.hold(user_id):
            user = self._users.find(user_id)
            if user.current_break is not None:
                finished = user.current_break.closed(self._clock.now())
                user = replace(user, current_break=None, prior_breaks=user.prior_breaks + (finished,))
            elif user.current_lunch_break is not None:
                finished = user.current_lunch_break.closed(self._clock.now())
                user = replace(user, current_lunch_break=None, prior_breaks=user.prior_breaks + (finished,))
            else:
                raise BreakNotStartedError()
            self._users.update(user)
        logger.info("user %s ended %s", user_id, finished.break_type.value)

    @staticmethod
    def _require_working(user: User) -> None:
        if not user.is_working:
            raise ShiftNotStartedError()
