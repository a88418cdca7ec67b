from __future__ import annotations

from datetime import date

import pytest
from werkzeug.security import generate_password_hash

from src.hr_portal.hr_portal.core.constants import DEFAULT_TEAM
from src.hr_portal.hr_portal.core.enums import Role
from src.hr_portal.hr_portal.core.exceptions import (
    AuthenticationError,
    EmailTakenError,
    UserNotFoundError,
    ValidationError,
)


@pytest.fixture
def admin_id(container):
    return container.users_repo.create_user(
        name="Alex Johnson",
        email="admin@example.com",
        password_hash=generate_password_hash("password123"),
        role=Role.ADMIN,
        team="Management",
        join_date=date(2020, 1, 15),
    )


def test_login_success_is_audited(container, admin_id):
    user = container.auth_service.login("admin@example.com", "password123")

    assert user.user_id == admin_id
    assert user.role == Role.ADMIN
    entries = container.audit.list_recent()
    assert [e.action for e in entries] == ["User Login"]
    assert entries[0].user_id == admin_id


def test_login_wrong_password_is_rejected_without_audit(container, admin_id):
    with pytest.raises(AuthenticationError) as exc:
        container.auth_service.login("admin@example.com", "nope")

    assert str(exc.value) == "Invalid email or password"
    assert exc.value.status_code == 401
    assert container.audit.list_recent() == []


def test_login_unknown_email(container, admin_id):
    with pytest.raises(AuthenticationError):
        container.auth_service.login("ghost@example.com", "password123")


def test_login_with_unusable_stored_hash(container):
    container.users_repo.create_user(
        name="Legacy",
        email="legacy@example.com",
        password_hash="CHANGE_ME",
        role=Role.EMPLOYEE,
        team=DEFAULT_TEAM,
        join_date=date(2019, 1, 1),
    )

    with pytest.raises(AuthenticationError):
        container.auth_service.login("legacy@example.com", "CHANGE_ME")


def test_signup_defaults_to_employee(container):
    user = container.auth_service.signup(
        name="Sam Lee", email="sam@example.com", password="pw", today=date(2024, 9, 1)
    )

    assert user.role == Role.EMPLOYEE
    assert user.team == DEFAULT_TEAM
    assert user.join_date == date(2024, 9, 1)
    assert user.password_hash != "pw"
    assert container.auth_service.login("sam@example.com", "pw").user_id == user.user_id
    assert "User Signed Up" in [e.action for e in container.audit.list_recent()]


def test_signup_rejects_taken_email_and_bad_role(container, admin_id):
    with pytest.raises(EmailTakenError) as exc:
        container.auth_service.signup(name="Other", email="admin@example.com", password="pw")
    assert exc.value.status_code == 400

    with pytest.raises(ValidationError):
        container.auth_service.signup(name="Other", email="other@example.com", password="pw", role="owner")
    with pytest.raises(ValidationError):
        container.auth_service.signup(name="", email="other@example.com", password="pw")


def test_update_profile_ignores_role_and_email(container, admin_id):
    emp_id = container.auth_service.signup(name="Sam Lee", email="sam@example.com", password="pw").user_id

    updated = container.user_service.update_profile(
        emp_id,
        {"name": "Samuel Lee", "team": "Design", "joinDate": "2023-02-01", "role": "admin", "email": "x@example.com"},
    )

    assert updated.name == "Samuel Lee"
    assert updated.team == "Design"
    assert updated.join_date == date(2023, 2, 1)
    assert updated.role == Role.EMPLOYEE
    assert updated.email == "sam@example.com"


def test_update_profile_changes_password(container, admin_id):
    container.user_service.update_profile(admin_id, {}, new_password="fresh-pass")

    assert container.auth_service.login("admin@example.com", "fresh-pass").user_id == admin_id
    with pytest.raises(AuthenticationError):
        container.auth_service.login("admin@example.com", "password123")


def test_update_unknown_user(container):
    with pytest.raises(UserNotFoundError):
        container.user_service.update_profile(404, {"name": "Nobody"})


def test_resolve_actor_falls_back_to_first_admin(container, admin_id):
    emp_id = container.auth_service.signup(name="Sam Lee", email="sam@example.com", password="pw").user_id

    assert container.user_service.resolve_actor(emp_id).user_id == emp_id
    assert container.user_service.resolve_actor(None).user_id == admin_id
    assert container.user_service.resolve_actor(999).user_id == admin_id
