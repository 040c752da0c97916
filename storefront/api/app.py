# This file builds the FastAPI application and registers all API routers.
# Startup behavior, middleware, and error handling are configured here in one place.
# The app adds request IDs, timing headers, and Prometheus request metrics.
# The database client is owned by the app: opened on startup, closed on shutdown.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from storefront.api.api_config import ApiConfig, get_api_config
from storefront.api.db_access import DatabaseClient
from storefront.api.error_handlers import register_error_handlers
from storefront.api.routers.catalog_aliases import router as catalog_aliases_router
from storefront.api.routers.categories import router as categories_router
from storefront.api.routers.health import router as health_router
from storefront.api.routers.images import router as images_router
from storefront.api.routers.order_products import router as order_products_router
from storefront.api.routers.orders import router as orders_router
from storefront.api.routers.products import router as products_router
from storefront.api.routers.uploads import router as uploads_router
from storefront.api.routers.users import router as users_router
from storefront.api.routers.wishlist import router as wishlist_router
from storefront.common.logging import configure_logging

LOGGER = logging.getLogger("storefront.api")

API_HTTP_REQUESTS_TOTAL = Counter(
    "storefront_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "storefront_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "storefront_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method", "path"],
)


def create_app(config: ApiConfig | None = None, db: DatabaseClient | None = None) -> FastAPI:
    """Create configured FastAPI application instance."""

    config = config or get_api_config()
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.api_name,
        description=(
            "Storefront backend: catalog, product search, customer orders, wishlists, users, "
            "and product image management."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "categories", "description": "Product categories."},
            {"name": "products", "description": "Catalog listing, search, and slug lookup."},
            {"name": "orders", "description": "Customer orders."},
            {"name": "order-product", "description": "Products held by each order."},
            {"name": "images", "description": "Product gallery images."},
            {"name": "wishlist", "description": "Per-user wishlists."},
            {"name": "users", "description": "Storefront accounts."},
            {"name": "uploads", "description": "Main product image upload."},
        ],
    )
    app.state.db = db or DatabaseClient(database_url=config.database_url)

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        path_label = request.url.path
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def open_database() -> None:
        app.state.db.open()
        if config.auto_create_schema:
            app.state.db.create_schema()
        app.state.db_connected_at_startup = app.state.db.can_connect()
        LOGGER.info(
            "Started %s (env=%s, db_connected=%s)",
            config.api_name,
            config.environment,
            app.state.db_connected_at_startup,
        )

    @app.on_event("shutdown")
    def close_database() -> None:
        app.state.db.close()

    register_error_handlers(app)

    app.include_router(health_router)
    for router in (
        categories_router,
        products_router,
        catalog_aliases_router,
        orders_router,
        order_products_router,
        images_router,
        wishlist_router,
        users_router,
        uploads_router,
    ):
        app.include_router(router, prefix=config.api_prefix)

    return app
