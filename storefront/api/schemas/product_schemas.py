# This file defines product request and response schemas.
# Create requires every catalog field except rating and stock, which have defaults.
# Update accepts any subset; only keys the client sent are merged into the stored row.

from __future__ import annotations

from pydantic import Field

from storefront.api.schemas.category_schemas import CategoryName
from storefront.api.schemas.common import BoundedInt, StorefrontModel


class ProductCreate(StorefrontModel):
    slug: str = Field(min_length=1)
    title: str = Field(min_length=1)
    main_image: str = Field(min_length=1)
    price: BoundedInt
    description: str
    manufacturer: str
    category_id: str = Field(min_length=1)
    rating: BoundedInt = 5
    in_stock: BoundedInt = 1


class ProductUpdate(StorefrontModel):
    slug: str | None = Field(default=None, min_length=1)
    title: str | None = Field(default=None, min_length=1)
    main_image: str | None = Field(default=None, min_length=1)
    price: BoundedInt | None = None
    description: str | None = None
    manufacturer: str | None = None
    category_id: str | None = None
    rating: BoundedInt | None = None
    in_stock: BoundedInt | None = None


class ProductRead(StorefrontModel):
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
    category: CategoryName | None = None
