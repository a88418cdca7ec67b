from __future__ import annotations

from flask import Flask, Response, jsonify

from ..common.http import actor_id, json_body
from ..common.serializers import user_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        data = json_body()
        user = container.auth_service.login(data.get("email") or "", data.get("pass") or "")
        return jsonify(user_json(user))

    @app.route("/api/auth/signup", methods=["POST"], endpoint="auth_signup")
    def signup():
        data = json_body()
        user = container.auth_service.signup(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("pass"),
            role=data.get("role"),
        )
        return jsonify(user_json(user)), 201

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    def get_user(user_id: int):
        return jsonify(user_json(container.user_service.get(user_id)))

    @app.route("/api/users/<int:user_id>", methods=["PUT"], endpoint="update_user")
    def update_user(user_id: int):
        data = json_body()
        user = container.user_service.update_profile(
            user_id,
            data.get("updates") or {},
            new_password=data.get("newPassword"),
        )
        return jsonify(user_json(user))

    @app.route("/api/admin/employees", methods=["GET"], endpoint="admin_employees")
    def admin_employees():
        return jsonify([user_json(u) for u in container.user_service.list_all()])

    @app.route("/api/admin/export/employees", methods=["GET"], endpoint="admin_export_employees")
    def admin_export_employees():
        actor = container.user_service.resolve_actor(actor_id())
        body = container.user_service.export_employees_csv(actor)
        return Response(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=employees.csv"},
        )
