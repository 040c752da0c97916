# This file defines customer order request and response schemas.

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from storefront.api.schemas.common import BoundedInt, StorefrontModel


class OrderCreate(StorefrontModel):
    name: str = Field(min_length=1)
    lastname: str = Field(min_length=1)
    phone: str
    email: str = Field(min_length=1)
    company: str = ""
    adress: str
    apartment: str = ""
    postal_code: str
    status: str
    city: str
    country: str
    order_notice: str = ""
    total: BoundedInt


class OrderUpdate(StorefrontModel):
    name: str | None = None
    lastname: str | None = None
    phone: str | None = None
    email: str | None = None
    company: str | None = None
    adress: str | None = None
    apartment: str | None = None
    postal_code: str | None = None
    status: str | None = None
    city: str | None = None
    country: str | None = None
    order_notice: str | None = None
    total: BoundedInt | None = None


class OrderRead(StorefrontModel):
    id: str
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
