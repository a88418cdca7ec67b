from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/ai/chat", methods=["POST"], endpoint="ai_chat")
    def ai_chat():
        data = json_body()
        text = container.assistant_service.answer(data.get("user"), data.get("prompt"))
        return jsonify({"response": text})
