# This file defines product image schemas.
# The image table predates the camelCase convention, so its keys are spelled `imageID` and `productID`.

from __future__ import annotations

from pydantic import Field

from storefront.api.schemas.common import StorefrontModel


class ImageCreate(StorefrontModel):
    product_id: str = Field(alias="productID", min_length=1)
    image: str = Field(min_length=1)


class ImageUpdate(StorefrontModel):
    product_id: str | None = Field(default=None, alias="productID")
    image: str | None = None


class ImageRead(StorefrontModel):
    image_id: str = Field(alias="imageID")
    product_id: str = Field(alias="productID")
    image: str
