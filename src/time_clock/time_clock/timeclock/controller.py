from __future__ import annotations

from flask import Flask, request

from ..common.validators import parse_optional_enum
from ..container import Container
from ..core.enums import BreakType


def register(app: Flask, container: Container) -> None:
    # Transitions answer 202 with an empty body; errors go through the app-level handlers.

    @app.route("/user/<user_id>/startShift", methods=["POST"], endpoint="start_shift")
    def start_shift(user_id: str):
        container.time_clock_service.start_shift(user_id)
        return "", 202

    @app.route("/user/<user_id>/endShift", methods=["POST"], endpoint="end_shift")
    def end_shift(user_id: str):
        container.time_clock_service.end_shift(user_id)
        return "", 202

    @app.route("/user/<user_id>/startBreak", methods=["POST"], endpoint="start_break")
    def start_break(user_id: str):
        break_type = parse_optional_enum(request.values.get("breakType"), BreakType, "breakType")
        container.time_clock_service.start_break(user_id, break_type or BreakType.BREAK)
        return "", 202

    @app.route("/user/<user_id>/endBreak", methods=["POST"], endpoint="end_break")
    def end_break(user_id: str):
        container.time_clock_service.end_break(user_id)
        return "", 202
