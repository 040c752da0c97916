# This file defines schemas for order-product links and the grouped order listing.

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from storefront.api.models import INT_COLUMN_MAX
from storefront.api.schemas.common import StorefrontModel
from storefront.api.schemas.product_schemas import ProductRead


class OrderProductCreate(StorefrontModel):
    customer_order_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)
    quantity: int = Field(gt=0, le=INT_COLUMN_MAX)


class OrderProductUpdate(StorefrontModel):
    customer_order_id: str | None = None
    product_id: str | None = None
    quantity: int | None = Field(default=None, gt=0, le=INT_COLUMN_MAX)


class OrderProductRead(StorefrontModel):
    id: str
    customer_order_id: str
    product_id: str
    quantity: int


class OrderProductDetail(OrderProductRead):
    product: ProductRead


class OrderSummary(StorefrontModel):
    name: str
    lastname: str
    phone: str
    email: str
    company: str
    adress: str
    apartment: str
    postal_code: str
    date_time: datetime
    status: str
    city: str
    country: str
    order_notice: str
    total: int


class OrderedProduct(StorefrontModel):
    id: str
    slug: str
    title: str
    main_image: str
    price: int
    rating: int
    description: str
    manufacturer: str
    in_stock: int
    category_id: str
    quantity: int


class OrderGroup(StorefrontModel):
    customer_order_id: str
    customer_order: OrderSummary
    products: list[OrderedProduct]
