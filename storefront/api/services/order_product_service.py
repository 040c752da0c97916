# This file implements the order-product link table: which products an order holds and how many.
# The grouped listing folds every link under its order so the admin dashboard can render one row per order.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from storefront.api.db_access import DatabaseClient
from storefront.api.models import OrderProduct
from storefront.api.services.gateway import gateway_errors
from storefront.api.services.order_service import order_summary
from storefront.api.services.product_service import product_row

LOGGER = logging.getLogger("storefront.order_products")


def link_row(link: OrderProduct) -> dict[str, Any]:
    return {
        "id": link.id,
        "customer_order_id": link.customer_order_id,
        "product_id": link.product_id,
        "quantity": link.quantity,
    }


class OrderProductService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def create_link(self, fields: dict[str, Any]) -> dict[str, Any]:
        # Unknown order or product ids surface as a foreign-key failure, reported as a 500.
        with gateway_errors("Error creating product order", logger=LOGGER), self.db.session() as session:
            link = OrderProduct(**fields)
            session.add(link)
            session.flush()
            return link_row(link)

    def update_link(self, link_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        with gateway_errors("Error updating product order", logger=LOGGER), self.db.session() as session:
            link = session.get(OrderProduct, link_id)
            if link is None:
                return None
            for key, value in changes.items():
                setattr(link, key, value)
            session.flush()
            return link_row(link)

    def delete_links_for_order(self, customer_order_id: str) -> int:
        with gateway_errors("Error deleting product order", logger=LOGGER), self.db.session() as session:
            result = session.execute(
                delete(OrderProduct).where(OrderProduct.customer_order_id == customer_order_id)
            )
            removed = result.rowcount or 0
        LOGGER.info("Removed %s product links from order %s", removed, customer_order_id)
        return removed

    def links_for_order(self, customer_order_id: str) -> list[dict[str, Any]]:
        query = (
            select(OrderProduct)
            .where(OrderProduct.customer_order_id == customer_order_id)
            .options(selectinload(OrderProduct.product))
        )
        with gateway_errors("Error fetching product order", logger=LOGGER), self.db.session() as session:
            links = session.scalars(query).all()
            return [{**link_row(link), "product": product_row(link.product)} for link in links]

    def grouped_by_order(self) -> list[dict[str, Any]]:
        """Return one entry per order, each carrying its products and their quantities."""

        query = select(OrderProduct).options(
            selectinload(OrderProduct.customer_order),
            selectinload(OrderProduct.product),
        )
        with gateway_errors("Error fetching product orders", logger=LOGGER), self.db.session() as session:
            links = session.scalars(query).all()

            groups: dict[str, dict[str, Any]] = {}
            for link in links:
                group = groups.get(link.customer_order_id)
                if group is None:
                    group = {
                        "customer_order_id": link.customer_order_id,
                        "customer_order": order_summary(link.customer_order),
                        "products": [],
                    }
                    groups[link.customer_order_id] = group
                group["products"].append({**product_row(link.product), "quantity": link.quantity})
            return list(groups.values())
