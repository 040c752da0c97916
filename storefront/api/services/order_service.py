# This file implements customer order reads and writes.
# Orders are stamped with their creation time by the model default; updates merge only supplied keys.
# Deleting an order removes its order-product links in the same transaction.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select

from storefront.api.db_access import DatabaseClient
from storefront.api.models import CustomerOrder, OrderProduct
from storefront.api.services.gateway import gateway_errors

LOGGER = logging.getLogger("storefront.orders")

ORDER_FIELDS: tuple[str, ...] = (
    "name",
    "lastname",
    "phone",
    "email",
    "company",
    "adress",
    "apartment",
    "postal_code",
    "date_time",
    "status",
    "city",
    "country",
    "order_notice",
    "total",
)


def order_summary(order: CustomerOrder) -> dict[str, Any]:
    return {field: getattr(order, field) for field in ORDER_FIELDS}


def order_row(order: CustomerOrder) -> dict[str, Any]:
    return {"id": order.id, **order_summary(order)}


class OrderService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_orders(self) -> list[dict[str, Any]]:
        with gateway_errors("Error fetching orders", logger=LOGGER), self.db.session() as session:
            orders = session.scalars(select(CustomerOrder).order_by(CustomerOrder.date_time)).all()
            return [order_row(order) for order in orders]

    def get_order(self, order_id: str) -> dict[str, Any] | None:
        with gateway_errors("Error fetching order", logger=LOGGER), self.db.session() as session:
            order = session.get(CustomerOrder, order_id)
            return order_row(order) if order is not None else None

    def create_order(self, fields: dict[str, Any]) -> dict[str, Any]:
        with gateway_errors("Error creating order", logger=LOGGER), self.db.session() as session:
            order = CustomerOrder(**fields)
            session.add(order)
            session.flush()
            LOGGER.info("Created order %s", order.id)
            return order_row(order)

    def update_order(self, order_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        with gateway_errors("Error updating order", logger=LOGGER), self.db.session() as session:
            order = session.get(CustomerOrder, order_id)
            if order is None:
                return None
            for key, value in changes.items():
                setattr(order, key, value)
            session.flush()
            return order_row(order)

    def delete_order(self, order_id: str) -> bool:
        with gateway_errors("Error deleting order", logger=LOGGER), self.db.session() as session:
            order = session.get(CustomerOrder, order_id)
            if order is None:
                return False
            session.execute(delete(OrderProduct).where(OrderProduct.customer_order_id == order_id))
            session.delete(order)
            return True
