# This file defines schema pieces shared by every storefront endpoint.
# Wire names are camelCase to match the existing database columns; Python code uses snake_case.

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.api.models import INT_COLUMN_MAX

# Non-negative integer that fits the 32-bit integer columns.
BoundedInt = Annotated[int, Field(ge=0, le=INT_COLUMN_MAX)]


class StorefrontModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
