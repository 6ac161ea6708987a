from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from ..core.enums import BreakType, Role


@dataclass(frozen=True)
class WorkShift:
    """Domain entity: one continuous on-duty interval."""

    start_time: datetime
    end_time: Optional[datetime] = None

    @property
    def in_progress(self) -> bool:
        return self.end_time is None

    def closed(self, at: datetime) -> "WorkShift":
        return replace(self, end_time=at)


@dataclass(frozen=True)
class Break:
    """Domain entity: an off-duty interval inside a shift (short break or lunch)."""

    break_type: BreakType
    start_time: datetime
    end_time: Optional[datetime] = None

    @property
    def in_progress(self) -> bool:
        return self.end_time is None

    def closed(self, at: datetime) -> "Break":
        return replace(self, end_time=at)


@dataclass(frozen=True)
class User:
    """Domain entity: User with its active slots and completed history.

    Note: Plain data object (no storage access). Transitions produce new
    instances via dataclasses.replace.
    """

    user_id: str
    name: Optional[str] = None
    role: Optional[Role] = None
    current_work_shift: Optional[WorkShift] = None
    current_break: Optional[Break] = None
    current_lunch_break: Optional[Break] = None
    prior_work_shifts: Tuple[WorkShift, ...] = ()
    prior_breaks: Tuple[Break, ...] = ()

    @property
    def is_working(self) -> bool:
        return self.current_work_shift is not None

    @property
    def is_on_break(self) -> bool:
        return self.current_break is not None

    @property
    def is_on_lunch(self) -> bool:
        return self.current_lunch_break is not None

    @property
    def is_administrator(self) -> bool:
        return self.role == Role.ADMINISTRATOR

    def break_slot(self, break_type: BreakType) -> Optional[Break]:
        if break_type == BreakType.LUNCH:
            return self.current_lunch_break
        return self.current_break
