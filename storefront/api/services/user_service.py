# This file implements user reads and writes.
# Passwords are stored as salted Werkzeug hashes and never leave this module.
# Deleting a user also clears their wishlist.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash

from storefront.api.db_access import DatabaseClient
from storefront.api.error_handlers import APIError
from storefront.api.models import User, Wishlist
from storefront.api.services.gateway import gateway_errors

LOGGER = logging.getLogger("storefront.users")


def user_row(user: User) -> dict[str, Any]:
    return {"id": user.id, "email": user.email, "role": user.role}


def _email_taken() -> APIError:
    return APIError(
        status_code=409,
        error_code="USER_EMAIL_TAKEN",
        message="User with this email already exists",
    )


class UserService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_users(self) -> list[dict[str, Any]]:
        with gateway_errors("Error fetching users", logger=LOGGER), self.db.session() as session:
            return [user_row(user) for user in session.scalars(select(User)).all()]

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        with gateway_errors("Error fetching user", logger=LOGGER), self.db.session() as session:
            user = session.get(User, user_id)
            return user_row(user) if user is not None else None

    def get_user_by_email(self, email: str) -> dict[str, Any] | None:
        with gateway_errors("Error fetching user", logger=LOGGER), self.db.session() as session:
            user = session.scalars(select(User).where(User.email == email)).first()
            return user_row(user) if user is not None else None

    def create_user(self, *, email: str, password: str, role: str) -> dict[str, Any]:
        with gateway_errors("Error creating user", logger=LOGGER), self.db.session() as session:
            if session.scalar(select(User.id).where(User.email == email)) is not None:
                raise _email_taken()

            user = User(email=email, password=generate_password_hash(password), role=role)
            session.add(user)
            try:
                session.flush()
            except IntegrityError as exc:
                raise _email_taken() from exc
            LOGGER.info("Created user %s", user.id)
            return user_row(user)

    def update_user(self, user_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        with gateway_errors("Error updating user", logger=LOGGER), self.db.session() as session:
            user = session.get(User, user_id)
            if user is None:
                return None

            new_email = changes.get("email")
            if new_email is not None and new_email != user.email:
                clash = session.scalar(select(User.id).where(User.email == new_email))
                if clash is not None:
                    raise _email_taken()

            for key, value in changes.items():
                if key == "password":
                    value = generate_password_hash(value)
                setattr(user, key, value)
            try:
                session.flush()
            except IntegrityError as exc:
                raise _email_taken() from exc
            return user_row(user)

    def delete_user(self, user_id: str) -> bool:
        with gateway_errors("Error deleting user", logger=LOGGER), self.db.session() as session:
            user = session.get(User, user_id)
            if user is None:
                return False
            session.execute(delete(Wishlist).where(Wishlist.user_id == user_id))
            session.delete(user)
            return True
