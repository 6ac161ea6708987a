from __future__ import annotations

from flask import Flask, jsonify, request, url_for

from ..common.validators import parse_optional_enum
from ..container import Container
from ..core.enums import Role
from .codec import user_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/user/<user_id>", methods=["POST"], endpoint="create_user")
    def create_user(user_id: str):
        user = container.user_service.create_user(user_id)
        location = url_for("read_user", user_id=user.user_id, _external=True)
        return jsonify(user_to_dict(user)), 201, {"Location": location}

    @app.route("/user/<user_id>", methods=["GET"], endpoint="read_user")
    def read_user(user_id: str):
        user = container.user_service.find_user(user_id)
        return jsonify(user_to_dict(user)), 200

    @app.route("/user/<user_id>/update", methods=["POST"], endpoint="update_user")
    def update_user(user_id: str):
        name = request.values.get("name")
        role = parse_optional_enum(request.values.get("role"), Role, "role")

        user = container.user_service.update_user(user_id, name=name, role=role)
        return jsonify(user_to_dict(user)), 202
