from __future__ import annotations

from flask import Flask, jsonify

from ..common.serializers import audit_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/audit-logs", methods=["GET"], endpoint="admin_audit_logs")
    def admin_audit_logs():
        return jsonify([audit_json(e) for e in container.audit.list_recent()])
