from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..common.serializers import admin_snapshot_json, attendance_json, employee_snapshot_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance(employee_id: int):
        data = json_body()
        record = container.attendance_service.mark(
            employee_id,
            data.get("type") or "",
            photo=data.get("photo"),
            location=data.get("location"),
        )
        return jsonify(attendance_json(record))

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: int):
        return jsonify([attendance_json(r) for r in container.attendance_service.list_for_employee(employee_id)])

    @app.route("/api/employees/<int:employee_id>/dashboard-data", methods=["GET"], endpoint="employee_dashboard")
    def employee_dashboard(employee_id: int):
        return jsonify(employee_snapshot_json(container.dashboard_service.employee_snapshot(employee_id)))

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    def admin_attendance():
        return jsonify([attendance_json(r) for r in container.attendance_service.list_all()])

    @app.route("/api/admin/dashboard-data", methods=["GET"], endpoint="admin_dashboard")
    def admin_dashboard():
        return jsonify(admin_snapshot_json(container.dashboard_service.admin_snapshot()))
