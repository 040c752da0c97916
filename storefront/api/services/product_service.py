# This file implements product reads and writes, including the catalog listing and search queries.
# Listing shapes one ORM select from the parsed paging, sort, and filter specs; ordering,
# filtering, and limits are left to the database.

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from typing import Any

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import InstrumentedAttribute, selectinload
from sqlalchemy.sql.elements import ColumnElement

from storefront.api.api_config import ApiConfig
from storefront.api.db_access import DatabaseClient
from storefront.api.error_handlers import APIError
from storefront.api.models import Category, Image, OrderProduct, Product, Wishlist
from storefront.api.pagination import (
    FilterSpec,
    catalog_pagination,
    parse_filters,
    parse_sort_token,
)
from storefront.api.services.category_service import category_row
from storefront.api.services.gateway import gateway_errors

LOGGER = logging.getLogger("storefront.products")

PRODUCT_SORT_FIELD_MAP: dict[str, InstrumentedAttribute[Any]] = {
    "title": Product.title,
    "price": Product.price,
    "rating": Product.rating,
    "inStock": Product.in_stock,
    "slug": Product.slug,
    "manufacturer": Product.manufacturer,
}

PRODUCT_FILTER_FIELD_MAP: dict[str, InstrumentedAttribute[Any]] = {
    "price": Product.price,
    "rating": Product.rating,
    "inStock": Product.in_stock,
}

_COMPARATORS: dict[str, Callable[[Any, Any], Any]] = {
    "lt": operator.lt,
    "lte": operator.le,
    "gt": operator.gt,
    "gte": operator.ge,
    "equals": operator.eq,
}

REFERENCED_PRODUCT_MESSAGE = "Cannot delete product because of foreign key constraint. "


def product_row(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "slug": product.slug,
        "title": product.title,
        "main_image": product.main_image,
        "price": product.price,
        "rating": product.rating,
        "description": product.description,
        "manufacturer": product.manufacturer,
        "in_stock": product.in_stock,
        "category_id": product.category_id,
    }


def _product_with_category(product: Product, *, name_only: bool) -> dict[str, Any]:
    row = product_row(product)
    if name_only:
        row["category"] = {"name": product.category.name}
    else:
        row["category"] = category_row(product.category)
    return row


def _filter_clause(spec: FilterSpec) -> ColumnElement[bool]:
    if spec.field == "category":
        return Product.category.has(Category.name == spec.value)
    column = PRODUCT_FILTER_FIELD_MAP[spec.field]
    return _COMPARATORS[spec.operator](column, spec.value)


def _slug_taken() -> APIError:
    return APIError(
        status_code=409,
        error_code="PRODUCT_SLUG_TAKEN",
        message="Product with this slug already exists",
    )


def _unknown_category() -> APIError:
    return APIError(
        status_code=400,
        error_code="CATEGORY_MISSING",
        message="Category does not exist",
    )


class ProductService:
    """Data access for product, slug, and search endpoints."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.config = config
        self.db = db

    def list_all_products(self) -> list[dict[str, Any]]:
        with gateway_errors("Error fetching products", logger=LOGGER), self.db.session() as session:
            products = session.scalars(select(Product)).all()
            return [product_row(product) for product in products]

    def list_products(self, *, raw_page: str | None, raw_query: str) -> list[dict[str, Any]]:
        """Return one catalog page, shaped by the `page`, `sort`, and `filters[...]` query tokens."""

        pagination = catalog_pagination(
            raw_page=raw_page,
            page_size=self.config.catalog_page_size,
            take=self.config.catalog_take,
        )
        sort = parse_sort_token(raw_query)
        filters = parse_filters(raw_query)

        query = select(Product).options(selectinload(Product.category))
        for spec in filters:
            query = query.where(_filter_clause(spec))
        if sort is not None:
            column = PRODUCT_SORT_FIELD_MAP[sort.field]
            query = query.order_by(column.asc() if sort.order == "asc" else column.desc())
        query = query.offset(pagination.offset).limit(pagination.take)

        with gateway_errors("Error fetching products", logger=LOGGER), self.db.session() as session:
            products = session.scalars(query).all()
            return [_product_with_category(product, name_only=True) for product in products]

    def search_products(self, *, term: str) -> list[dict[str, Any]]:
        query = select(Product).where(
            or_(
                Product.title.contains(term, autoescape=True),
                Product.description.contains(term, autoescape=True),
            )
        )
        with gateway_errors("Error searching products", logger=LOGGER), self.db.session() as session:
            products = session.scalars(query).all()
            return [product_row(product) for product in products]

    def get_product(self, product_id: str) -> dict[str, Any] | None:
        with gateway_errors("Error fetching product", logger=LOGGER), self.db.session() as session:
            product = session.get(Product, product_id, options=[selectinload(Product.category)])
            if product is None:
                return None
            return _product_with_category(product, name_only=False)

    def get_product_by_slug(self, slug: str) -> dict[str, Any] | None:
        query = select(Product).where(Product.slug == slug).options(selectinload(Product.category))
        with gateway_errors("Error fetching product", logger=LOGGER), self.db.session() as session:
            product = session.scalars(query).first()
            if product is None:
                return None
            return _product_with_category(product, name_only=False)

    def create_product(self, fields: dict[str, Any]) -> dict[str, Any]:
        with gateway_errors("Error creating product", logger=LOGGER), self.db.session() as session:
            if session.scalar(select(Product.id).where(Product.slug == fields["slug"])) is not None:
                raise _slug_taken()
            if session.get(Category, fields["category_id"]) is None:
                raise _unknown_category()

            product = Product(**fields)
            session.add(product)
            try:
                session.flush()
            except IntegrityError as exc:
                raise _slug_taken() from exc
            LOGGER.info("Created product %s (%s)", product.id, product.slug)
            return product_row(product)

    def update_product(self, product_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        with gateway_errors("Error updating product", logger=LOGGER), self.db.session() as session:
            product = session.get(Product, product_id)
            if product is None:
                return None

            new_slug = changes.get("slug")
            if new_slug is not None and new_slug != product.slug:
                clash = session.scalar(select(Product.id).where(Product.slug == new_slug))
                if clash is not None:
                    raise _slug_taken()
            new_category = changes.get("category_id")
            if new_category is not None and session.get(Category, new_category) is None:
                raise _unknown_category()

            for key, value in changes.items():
                setattr(product, key, value)
            try:
                session.flush()
            except IntegrityError as exc:
                raise _slug_taken() from exc
            return product_row(product)

    def delete_product(self, product_id: str) -> bool:
        with gateway_errors("Error deleting product", logger=LOGGER), self.db.session() as session:
            linked_order = session.scalar(
                select(OrderProduct.id).where(OrderProduct.product_id == product_id).limit(1)
            )
            if linked_order is not None:
                raise APIError(
                    status_code=400,
                    error_code="PRODUCT_REFERENCED",
                    message=REFERENCED_PRODUCT_MESSAGE,
                )

            product = session.get(Product, product_id)
            if product is None:
                return False

            session.execute(delete(Image).where(Image.product_id == product_id))
            session.execute(delete(Wishlist).where(Wishlist.product_id == product_id))
            session.delete(product)
            try:
                session.flush()
            except IntegrityError as exc:
                raise APIError(
                    status_code=400,
                    error_code="PRODUCT_REFERENCED",
                    message=REFERENCED_PRODUCT_MESSAGE,
                ) from exc
            LOGGER.info("Deleted product %s", product_id)
            return True
