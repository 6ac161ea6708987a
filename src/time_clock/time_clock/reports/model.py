from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class ReportDataFilters:
    """Optional predicates for one activity report query. Never persisted."""

    user_id_to_view: Optional[str] = None
    prior_work_shifts_threshold: int = 0
    prior_breaks_threshold: int = 0
    is_currently_on_break: bool = False
    is_currently_on_lunch: bool = False
    role_to_view: Optional[Role] = None
    shift_begins_before: Optional[datetime] = None
    shift_begins_after: Optional[datetime] = None
    break_begins_before: Optional[datetime] = None
    break_begins_after: Optional[datetime] = None
