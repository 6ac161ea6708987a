from __future__ import annotations

from typing import Any, Dict, Optional

from ..common.datetime_utils import from_iso, to_iso
from ..core.enums import BreakType, Role
from .model import Break, User, WorkShift

# Record layout shared by the JSON database file and the HTTP responses.


def shift_to_dict(shift: Optional[WorkShift]) -> Optional[Dict[str, Any]]:
    if shift is None:
        return None
    return {"startTime": to_iso(shift.start_time), "endTime": to_iso(shift.end_time)}


def break_to_dict(brk: Optional[Break]) -> Optional[Dict[str, Any]]:
    if brk is None:
        return None
    return {
        "breakType": brk.break_type.value,
        "startTime": to_iso(brk.start_time),
        "endTime": to_iso(brk.end_time),
    }


def user_to_dict(user: User) -> Dict[str, Any]:
    return {
        "userId": user.user_id,
        "name": user.name,
        "role": user.role.value if user.role else None,
        "currentWorkShift": shift_to_dict(user.current_work_shift),
        "currentBreak": break_to_dict(user.current_break),
        "currentLunchBreak": break_to_dict(user.current_lunch_break),
        "priorWorkShifts": [shift_to_dict(s) for s in user.prior_work_shifts],
        "priorBreaks": [break_to_dict(b) for b in user.prior_breaks],
    }


def shift_from_dict(data: Optional[Dict[str, Any]]) -> Optional[WorkShift]:
    if not data:
        return None
    return WorkShift(start_time=from_iso(data["startTime"]), end_time=from_iso(data.get("endTime")))


def break_from_dict(data: Optional[Dict[str, Any]]) -> Optional[Break]:
    if not data:
        return None
    return Break(
        break_type=BreakType(data.get("breakType") or BreakType.BREAK.value),
        start_time=from_iso(data["startTime"]),
        end_time=from_iso(data.get("endTime")),
    )


def user_from_dict(data: Dict[str, Any]) -> User:
    role = data.get("role")
    return User(
        user_id=str(data["userId"]),
        name=data.get("name"),
        role=Role(role) if role else None,
        current_work_shift=shift_from_dict(data.get("currentWorkShift")),
        current_break=break_from_dict(data.get("currentBreak")),
        current_lunch_break=break_from_dict(data.get("currentLunchBreak")),
        prior_work_shifts=tuple(shift_from_dict(s) for s in data.get("priorWorkShifts") or []),
        prior_breaks=tuple(break_from_dict(b) for b in data.get("priorBreaks") or []),
    )
