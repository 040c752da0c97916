# This file implements category reads and writes.
# Category names are unique: the check runs in the same transaction as the write, and a
# unique-constraint violation from a concurrent writer is reported the same way.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from storefront.api.db_access import DatabaseClient
from storefront.api.error_handlers import APIError
from storefront.api.models import Category
from storefront.api.services.gateway import gateway_errors

LOGGER = logging.getLogger("storefront.categories")


def category_row(category: Category) -> dict[str, Any]:
    return {"id": category.id, "name": category.name}


def _duplicate_name() -> APIError:
    return APIError(
        status_code=409,
        error_code="CATEGORY_NAME_TAKEN",
        message="Category with this name already exists",
    )


class CategoryService:
    """Data access for the category endpoints."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_categories(self) -> list[dict[str, Any]]:
        with gateway_errors("Error fetching categories", logger=LOGGER), self.db.session() as session:
            categories = session.scalars(select(Category).order_by(Category.created_at)).all()
            return [category_row(category) for category in categories]

    def get_category(self, category_id: str) -> dict[str, Any] | None:
        with gateway_errors("Error fetching category", logger=LOGGER), self.db.session() as session:
            category = session.get(Category, category_id)
            return category_row(category) if category is not None else None

    def create_category(self, *, name: str) -> dict[str, Any]:
        with gateway_errors("Error creating category", logger=LOGGER), self.db.session() as session:
            if session.scalar(select(Category.id).where(Category.name == name)) is not None:
                raise _duplicate_name()

            category = Category(name=name)
            session.add(category)
            try:
                session.flush()
            except IntegrityError as exc:
                raise _duplicate_name() from exc
            LOGGER.info("Created category %s", category.id)
            return category_row(category)

    def update_category(self, category_id: str, *, name: str) -> dict[str, Any] | None:
        with gateway_errors("Error updating category", logger=LOGGER), self.db.session() as session:
            category = session.get(Category, category_id)
            if category is None:
                return None

            clash = session.scalar(
                select(Category.id).where(Category.name == name, Category.id != category_id)
            )
            if clash is not None:
                raise _duplicate_name()

            category.name = name
            try:
                session.flush()
            except IntegrityError as exc:
                raise _duplicate_name() from exc
            return category_row(category)

    def delete_category(self, category_id: str) -> bool:
        with gateway_errors("Error deleting category", logger=LOGGER), self.db.session() as session:
            category = session.get(Category, category_id)
            if category is None:
                return False
            session.delete(category)
            return True
