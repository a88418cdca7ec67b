from __future__ import annotations

import importlib

from config import get_settings_module


ORIGIN = "http://localhost:5173"


def test_cors_headers_on_every_response(client):
    plain = client.get("/api/admin/employees")
    cross = client.get("/api/admin/employees", headers={"Origin": ORIGIN})

    assert plain.headers["Access-Control-Allow-Origin"] == "*"
    assert cross.headers["Access-Control-Allow-Origin"] in ("*", ORIGIN)


def test_preflight_is_answered(client):
    resp = client.options(
        "/api/admin/leave-requests/3",
        headers={
            "Origin": ORIGIN,
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Content-Type, X-User-ID",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] in ("*", ORIGIN)
    assert "PUT" in resp.headers["Access-Control-Allow-Methods"]
    assert "x-user-id" in resp.headers["Access-Control-Allow-Headers"].lower()


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nowhere")

    assert resp.status_code == 404
    assert "message" in resp.get_json()


def test_non_object_body_is_rejected(client):
    resp = client.post("/api/auth/login", json=["admin@example.com"])

    assert resp.status_code == 400


def test_oversized_body_is_rejected(client):
    resp = client.post(
        "/api/employees/2/attendance",
        data=b"x" * (5 * 1024 * 1024 + 1),
        content_type="application/json",
    )

    assert resp.status_code == 413


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"
    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_testing_settings_use_memory_store_with_seed(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module(get_settings_module())

    assert settings.STORE_BACKEND == "memory"
    assert settings.AUTO_SEED_DB is True
    assert settings.API_KEY is None
