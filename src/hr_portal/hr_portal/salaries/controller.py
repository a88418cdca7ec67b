from __future__ import annotations

from flask import Flask, jsonify

from ..common.serializers import salary_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/salaries", methods=["GET"], endpoint="employee_salaries")
    def employee_salaries(employee_id: int):
        return jsonify([salary_json(s) for s in container.salary_service.list_for_employee(employee_id)])

    @app.route("/api/admin/salaries", methods=["GET"], endpoint="admin_salaries")
    def admin_salaries():
        return jsonify([salary_json(s) for s in container.salary_service.list_all()])
