# This file defines response schemas for health, readiness, and version endpoints.
# The models carry the request id so probes can be traced through the logs.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    request_id: str
    status: str
    environment: str
    service_name: str
    timestamp: datetime


class ReadinessResponse(BaseModel):
    request_id: str
    db_connected: bool
    catalog_ready: bool
    orders_ready: bool
    ready: bool
    database: str
    timestamp: datetime


class VersionResponse(BaseModel):
    request_id: str
    api_prefix: str
    app_version: str
    git_commit: str | None = None
    project: str
    version: str
    timestamp: datetime
