# This file defines user schemas. Password hashes never appear in responses.

from __future__ import annotations

from pydantic import Field

from storefront.api.schemas.common import StorefrontModel


class UserCreate(StorefrontModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)
    role: str = "user"


class UserUpdate(StorefrontModel):
    email: str | None = Field(default=None, min_length=3)
    password: str | None = Field(default=None, min_length=1)
    role: str | None = None


class UserRead(StorefrontModel):
    id: str
    email: str
    role: str
