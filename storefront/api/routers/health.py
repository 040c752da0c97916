# This file defines liveness, readiness, and version endpoints for API operations.
# Readiness checks database connectivity and that the catalog and order tables exist.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime

from fastapi import APIRouter, Request

from storefront.api.dependencies import ConfigDep, DBDep
from storefront.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse

router = APIRouter(tags=["health"])

CATALOG_TABLES: tuple[str, ...] = ("category", "product", "image")
ORDER_TABLES: tuple[str, ...] = ("customer_order", "customer_order_product")


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return completed.stdout.strip() or None


@router.get("/health", response_model=HealthResponse)
def health(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(request: Request, db: DBDep) -> dict[str, object]:
    db_connected = db.can_connect()
    catalog_ready = db_connected and all(db.table_exists(name) for name in CATALOG_TABLES)
    orders_ready = db_connected and all(db.table_exists(name) for name in ORDER_TABLES)

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "catalog_ready": catalog_ready,
        "orders_ready": orders_ready,
        "ready": db_connected and catalog_ready and orders_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "api_prefix": config.api_prefix,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
