from __future__ import annotations

from datetime import date, timedelta

import pytest
from werkzeug.security import generate_password_hash

from src.hr_portal.hr_portal.assistant.client import TextGenerationError
from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.core.enums import AttendanceStatus, Role
from src.hr_portal.hr_portal.core.exceptions import ServiceUnavailableError, ValidationError
from src.hr_portal.hr_portal.database.memory_store import MemoryStore


class RecordingGenerator:
    def __init__(self, reply="Here is your answer."):
        self.reply = reply
        self.prompts = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


class BrokenGenerator:
    def generate(self, prompt: str) -> str:
        raise TextGenerationError("quota exceeded")


def _container_with(generator):
    c = build_container(backend="memory", store=MemoryStore(), text_generator=generator)
    emp_id = c.users_repo.create_user(
        name="Jane Doe",
        email="jane@example.com",
        password_hash=generate_password_hash("secret"),
        role=Role.EMPLOYEE,
        team="Engineering",
        join_date=date(2022, 3, 10),
    )
    return c, emp_id


def test_unconfigured_assistant_is_unavailable():
    c, emp_id = _container_with(None)

    with pytest.raises(ServiceUnavailableError) as exc:
        c.assistant_service.answer({"id": emp_id, "name": "Jane Doe"}, "How many leave days do I have?")

    assert exc.value.status_code == 503
    assert "API_KEY" in str(exc.value)


@pytest.mark.parametrize("user, prompt", [(None, "hi"), ({"id": 1}, ""), ({"id": 1}, None)])
def test_prompt_and_user_are_required(user, prompt):
    c, _ = _container_with(RecordingGenerator())

    with pytest.raises(ValidationError):
        c.assistant_service.answer(user, prompt)


def test_prompt_carries_bounded_context():
    gen = RecordingGenerator()
    c, emp_id = _container_with(gen)
    start = date(2024, 5, 1)
    for i in range(7):
        c.attendance_repo.create(
            employee_id=emp_id,
            employee_name="Jane Doe",
            work_date=start + timedelta(days=i),
            check_in=None,
            check_out=None,
            status=AttendanceStatus.ABSENT,
        )
    for month, year in (("December", 2023), ("March", 2024), ("January", 2024), ("February", 2024)):
        c.salaries_repo.create(
            employee_id=emp_id, month=month, year=year, basic=4000, allowances=0, deductions=0, net_salary=4000
        )

    answer = c.assistant_service.answer({"id": emp_id, "name": "Jane Doe", "role": "employee"}, "Summarize my month")

    assert answer == "Here is your answer."
    prompt = gen.prompts[0]
    assert "User Name: Jane Doe" in prompt
    assert 'User Query: "Summarize my month"' in prompt
    for i in range(2, 7):
        assert (start + timedelta(days=i)).isoformat() in prompt
    for i in range(2):
        assert (start + timedelta(days=i)).isoformat() not in prompt
    assert '"March"' in prompt and '"February"' in prompt
    assert '"January"' not in prompt and '"December"' not in prompt
    assert '"annual": 15' in prompt


def test_check_in_photo_is_not_sent():
    gen = RecordingGenerator()
    c, emp_id = _container_with(gen)
    c.attendance_service.check_in(emp_id, "data:image/jpeg;base64,SECRETPIXELS")

    c.assistant_service.answer({"id": emp_id, "name": "Jane Doe"}, "Did I check in?")

    assert "SECRETPIXELS" not in gen.prompts[0]


def test_generator_failure_is_reported_as_unavailable():
    c, emp_id = _container_with(BrokenGenerator())

    with pytest.raises(ServiceUnavailableError) as exc:
        c.assistant_service.answer({"id": emp_id}, "hello")

    assert str(exc.value) == "An error occurred while communicating with the AI."


def test_chat_endpoint(make_client):
    c, emp_id = _container_with(RecordingGenerator("You have 15 annual days."))
    client = make_client(c)

    resp = client.post("/api/ai/chat", json={"prompt": "Leave?", "user": {"id": emp_id, "name": "Jane Doe"}})
    assert resp.status_code == 200
    assert resp.get_json() == {"response": "You have 15 annual days."}

    missing = client.post("/api/ai/chat", json={"user": {"id": emp_id}})
    assert missing.status_code == 400


def test_chat_endpoint_unconfigured(client):
    resp = client.post("/api/ai/chat", json={"prompt": "Leave?", "user": {"id": 2}})

    assert resp.status_code == 503
    assert resp.get_json()["message"] == "AI Assistant is not configured on the server. API_KEY is missing."
