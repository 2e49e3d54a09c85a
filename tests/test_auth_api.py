"""
Identity, template catalogue and health endpoints
"""
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError

from smartresume.crud import crud_user
from smartresume.models.user import User


def test_health_needs_no_identity(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_current_user_is_created_from_headers(client, auth_headers):
    response = client.get("/api/auth/user", headers=auth_headers)

    assert response.status_code == 200
    user = response.json()
    assert user["id"] == "user-1"
    assert user["email"] == "jane.doe@example.com"
    assert user["firstName"] == "Jane"
    assert user["lastName"] is None


def test_profile_headers_update_stored_user(client, auth_headers):
    client.get("/api/auth/user", headers=auth_headers)

    headers = dict(auth_headers, **{"X-User-Last-Name": "Doe"})
    user = client.get("/api/auth/user", headers=headers).json()

    assert user["firstName"] == "Jane"
    assert user["lastName"] == "Doe"


def test_missing_or_blank_identity_is_401(client):
    assert client.get("/api/auth/user").status_code == 401
    assert client.get("/api/auth/user", headers={"X-User-Id": "  "}).status_code == 401


def test_templates_catalogue(client, auth_headers):
    templates = client.get("/api/templates", headers=auth_headers).json()

    assert [t["id"] for t in templates] == ["modern", "minimal", "executive"]
    assert templates[0]["badge"] == "Most Popular"


def test_upsert_keeps_values_that_were_not_sent(db_session):
    crud_user.upsert_user(db_session, "user-9", email="sam@example.com", firstName="Sam")
    user = crud_user.upsert_user(db_session, "user-9", lastName="Lee")

    assert user.email == "sam@example.com"
    assert user.firstName == "Sam"
    assert user.lastName == "Lee"


def test_upsert_after_concurrent_insert_updates_existing_row(db_session):
    crud_user.upsert_user(db_session, "user-9", email="sam@example.com", firstName="Sam")

    # Another request committed the row after this one looked it up
    with patch.object(crud_user, "get_user", return_value=None):
        user = crud_user.upsert_user(db_session, "user-9", email="sam@example.com", lastName="Lee")

    assert user.id == "user-9"
    assert user.firstName == "Sam"
    assert user.lastName == "Lee"
    assert db_session.query(User).count() == 1


def test_upsert_email_owned_by_another_user_still_fails(db_session):
    crud_user.upsert_user(db_session, "user-9", email="sam@example.com")

    with pytest.raises(IntegrityError):
        crud_user.upsert_user(db_session, "user-10", email="sam@example.com")
