from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import parse_optional_bool, parse_optional_datetime, parse_optional_enum, parse_optional_int
from ..container import Container
from ..core.enums import Role
from ..users.codec import user_to_dict
from .model import ReportDataFilters


def _filters_from_request() -> ReportDataFilters:
    args = request.args
    return ReportDataFilters(
        user_id_to_view=args.get("userIdToView") or None,
        prior_work_shifts_threshold=parse_optional_int(args.get("priorWorkShiftsThreshold"), "priorWorkShiftsThreshold"),
        prior_breaks_threshold=parse_optional_int(args.get("priorBreaksThreshold"), "priorBreaksThreshold"),
        is_currently_on_break=parse_optional_bool(args.get("isCurrentlyOnBreak"), "isCurrentlyOnBreak"),
        is_currently_on_lunch=parse_optional_bool(args.get("isCurrentlyOnLunch"), "isCurrentlyOnLunch"),
        role_to_view=parse_optional_enum(args.get("roleToView"), Role, "roleToView"),
        shift_begins_before=parse_optional_datetime(args.get("shiftBeginsBefore"), "shiftBeginsBefore"),
        shift_begins_after=parse_optional_datetime(args.get("shiftBeginsAfter"), "shiftBeginsAfter"),
        break_begins_before=parse_optional_datetime(args.get("breakBeginsBefore"), "breakBeginsBefore"),
        break_begins_after=parse_optional_datetime(args.get("breakBeginsAfter"), "breakBeginsAfter"),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/<admin_user_id>/userActivity", methods=["GET"], endpoint="user_activity")
    def user_activity(admin_user_id: str):
        filters = _filters_from_request()
        report = container.activity_report_service.find_user_activity(admin_user_id, filters)
        return jsonify({user_id: user_to_dict(user) for user_id, user in report.items()}), 200
