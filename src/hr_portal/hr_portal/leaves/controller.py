from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import actor_id, json_body
from ..common.serializers import leave_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/leave-requests", methods=["GET"], endpoint="employee_leaves")
    def employee_leaves(employee_id: int):
        return jsonify([leave_json(r) for r in container.leave_service.list_for_employee(employee_id)])

    @app.route("/api/employees/<int:employee_id>/leave-requests", methods=["POST"], endpoint="submit_leave")
    def submit_leave(employee_id: int):
        data = json_body()
        created = container.leave_service.submit(
            employee_id,
            start_date=data.get("startDate") or "",
            end_date=data.get("endDate") or "",
            reason=data.get("reason") or "",
        )
        return jsonify(leave_json(created)), 201

    @app.route("/api/admin/leave-requests", methods=["GET"], endpoint="admin_leaves")
    def admin_leaves():
        return jsonify([leave_json(r) for r in container.leave_service.list_for_admin()])

    @app.route("/api/admin/leave-requests/<int:request_id>", methods=["PUT"], endpoint="decide_leave")
    def decide_leave(request_id: int):
        data = json_body()
        actor = container.user_service.resolve_actor(actor_id())
        decided = container.leave_service.decide(request_id, data.get("status") or "", actor=actor)
        return jsonify(leave_json(decided))
