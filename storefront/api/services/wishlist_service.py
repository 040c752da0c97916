# This file implements wishlist reads and writes.
# The same product may be wished more than once; lookups by user and product therefore return lists.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from storefront.api.db_access import DatabaseClient
from storefront.api.models import Wishlist
from storefront.api.services.gateway import gateway_errors
from storefront.api.services.product_service import product_row

LOGGER = logging.getLogger("storefront.wishlist")


def wish_row(item: Wishlist) -> dict[str, Any]:
    return {"id": item.id, "user_id": item.user_id, "product_id": item.product_id}


def _with_product(item: Wishlist) -> dict[str, Any]:
    return {**wish_row(item), "product": product_row(item.product)}


class WishlistService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_items(self) -> list[dict[str, Any]]:
        query = select(Wishlist).options(selectinload(Wishlist.product))
        with gateway_errors("Error fetching wishlist", logger=LOGGER), self.db.session() as session:
            return [_with_product(item) for item in session.scalars(query).all()]

    def items_for_user(self, user_id: str) -> list[dict[str, Any]]:
        query = (
            select(Wishlist)
            .where(Wishlist.user_id == user_id)
            .options(selectinload(Wishlist.product))
        )
        with gateway_errors("Error fetching wishlist", logger=LOGGER), self.db.session() as session:
            return [_with_product(item) for item in session.scalars(query).all()]

    def matching_items(self, *, user_id: str, product_id: str) -> list[dict[str, Any]]:
        query = select(Wishlist).where(
            Wishlist.user_id == user_id, Wishlist.product_id == product_id
        )
        with gateway_errors("Error fetching wishlist", logger=LOGGER), self.db.session() as session:
            return [wish_row(item) for item in session.scalars(query).all()]

    def create_item(self, *, user_id: str, product_id: str) -> dict[str, Any]:
        with gateway_errors("Error creating wish item", logger=LOGGER), self.db.session() as session:
            item = Wishlist(user_id=user_id, product_id=product_id)
            session.add(item)
            session.flush()
            return wish_row(item)

    def delete_items(self, *, user_id: str, product_id: str) -> int:
        with gateway_errors("Error deleting wish item", logger=LOGGER), self.db.session() as session:
            result = session.execute(
                delete(Wishlist).where(
                    Wishlist.user_id == user_id, Wishlist.product_id == product_id
                )
            )
            return result.rowcount or 0
