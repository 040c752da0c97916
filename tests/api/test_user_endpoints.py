# This file tests user endpoints and password handling.

from __future__ import annotations

from sqlalchemy import select
from werkzeug.security import check_password_hash

from storefront.api.db_access import DatabaseClient
from storefront.api.models import User
from tests.api.support import api_test_client, build_test_config, create_user


def test_create_user_hides_password_and_defaults_role() -> None:
    with api_test_client() as client:
        user = create_user(client, "buyer@example.com")

    assert user["email"] == "buyer@example.com"
    assert user["role"] == "user"
    assert "password" not in user


def test_password_is_stored_hashed() -> None:
    config = build_test_config()
    db = DatabaseClient(database_url=config.database_url)
    with api_test_client(config=config, db_client=db) as client:
        create_user(client, "hash@example.com")
        with db.session() as session:
            stored = session.scalars(select(User).where(User.email == "hash@example.com")).one()
            password = stored.password

    assert password != "s3cret-pass"
    assert check_password_hash(password, "s3cret-pass")


def test_duplicate_email_returns_409() -> None:
    with api_test_client() as client:
        create_user(client, "dup@example.com")
        response = client.post("/api/users", json={"email": "dup@example.com", "password": "x"})

    assert response.status_code == 409
    assert response.json() == {"error": "User with this email already exists"}


def test_lookup_by_email_and_id() -> None:
    with api_test_client() as client:
        user = create_user(client, "find@example.com")
        by_email = client.get("/api/users/email/find@example.com")
        by_id = client.get(f"/api/users/{user['id']}")
        listed = client.get("/api/users")
        missing = client.get("/api/users/email/nobody@example.com")

    assert by_email.json() == user
    assert by_id.json() == user
    assert listed.json() == [user]
    assert missing.status_code == 404
    assert missing.json() == {"error": "User not found"}


def test_update_user_role_and_email_conflict() -> None:
    with api_test_client() as client:
        create_user(client, "taken@example.com")
        user = create_user(client, "admin@example.com")
        promoted = client.put(f"/api/users/{user['id']}", json={"role": "admin"})
        clash = client.put(f"/api/users/{user['id']}", json={"email": "taken@example.com"})
        missing = client.put("/api/users/unknown", json={"role": "admin"})

    assert promoted.status_code == 200
    assert promoted.json()["role"] == "admin"
    assert clash.status_code == 409
    assert missing.status_code == 404


def test_delete_user() -> None:
    with api_test_client() as client:
        user = create_user(client)
        deleted = client.delete(f"/api/users/{user['id']}")
        missing = client.delete(f"/api/users/{user['id']}")

    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert missing.json() == {"error": "User not found"}
