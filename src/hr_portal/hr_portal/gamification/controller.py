from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import actor_id, json_body
from ..common.serializers import settings_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/gamification-settings", methods=["GET"], endpoint="get_gamification_settings")
    def get_gamification_settings():
        return jsonify(settings_json(container.gamification_service.get_settings()))

    @app.route("/api/admin/gamification-settings", methods=["PUT"], endpoint="update_gamification_settings")
    def update_gamification_settings():
        data = json_body()
        actor = container.user_service.resolve_actor(actor_id())
        settings = container.gamification_service.update_settings(
            points_for_punctuality=data.get("pointsForPunctuality"),
            points_for_perfect_week=data.get("pointsForPerfectWeek"),
            actor=actor,
        )
        return jsonify(settings_json(settings))
