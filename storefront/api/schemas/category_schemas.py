# This file defines category request and response schemas.

from __future__ import annotations

from pydantic import Field

from storefront.api.schemas.common import StorefrontModel


class CategoryCreate(StorefrontModel):
    name: str = Field(min_length=1)


class CategoryUpdate(StorefrontModel):
    name: str = Field(min_length=1)


class CategoryRead(StorefrontModel):
    id: str
    name: str


class CategoryName(StorefrontModel):
    id: str | None = None
    name: str
