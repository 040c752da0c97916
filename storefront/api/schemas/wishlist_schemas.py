# This file defines wishlist schemas.

from __future__ import annotations

from pydantic import Field

from storefront.api.schemas.common import StorefrontModel
from storefront.api.schemas.product_schemas import ProductRead


class WishlistCreate(StorefrontModel):
    user_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)


class WishlistRead(StorefrontModel):
    id: str
    user_id: str
    product_id: str


class WishlistDetail(WishlistRead):
    product: ProductRead
