# This file defines the API error type and the exception handlers that render it.
# Every failure leaves the service as `{"error": "<message>"}` so existing storefront clients can parse it.
# Validation failures become 400s, and unexpected exceptions become a generic 500 without stack traces.

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

LOGGER = logging.getLogger("storefront.api")


class APIError(Exception):
    """Domain error type with structured API details."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(message)


def not_found(resource: str) -> APIError:
    return APIError(
        status_code=404,
        error_code=f"{resource.upper()}_NOT_FOUND",
        message=f"{resource} not found",
    )


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(*, message: str, details: Any | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    return body


def _validation_details(exc: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
            "type": str(error.get("type", "")),
        }
        for error in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(message=exc.message, details=exc.details),
            headers={"x-error-code": exc.error_code},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body(
                message="Invalid request parameters.",
                details=_validation_details(exc),
            ),
            headers={"x-error-code": "VALIDATION_ERROR"},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(message=str(exc.detail)),
            headers={"x-error-code": "HTTP_ERROR"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.error(
            "Unhandled error for request %s", _request_id(request), exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(message="The server encountered an unexpected error."),
            headers={"x-error-code": "INTERNAL_SERVER_ERROR"},
        )
