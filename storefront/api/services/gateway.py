# This file converts database failures into API errors for the service layer.
# The original exception is logged with its traceback; clients only see the per-resource message.

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from storefront.api.error_handlers import APIError


@contextmanager
def gateway_errors(message: str, *, logger: logging.Logger) -> Iterator[None]:
    """Re-raise any SQLAlchemy error inside the block as a 500 `APIError`."""

    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s: %s", message, exc.__class__.__name__)
        raise APIError(
            status_code=500,
            error_code="DATABASE_ERROR",
            message=message,
        ) from exc
