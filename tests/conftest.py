from __future__ import annotations

from datetime import date

import pytest

from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.database.memory_store import MemoryStore
from src.hr_portal.hr_portal.database.seed import seed_demo_data
from src.hr_portal.hr_portal.main import create_app


@pytest.fixture
def container():
    return build_container(backend="memory", store=MemoryStore())


@pytest.fixture
def seeded_container(container):
    seed_demo_data(container, today=date.today())
    return container


@pytest.fixture
def make_client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(c):
        app = create_app(container=c)
        return app.test_client()

    return _make


@pytest.fixture
def client(seeded_container, make_client):
    return make_client(seeded_container)
