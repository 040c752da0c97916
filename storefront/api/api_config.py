# This file defines runtime settings for the storefront API in one place.
# Routing prefix, database location, upload directory, and catalog paging can change without code edits.
# The loader reads `.env` plus the process environment and applies local-development defaults.

from __future__ import annotations

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Storefront API"
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 8000
    environment: str = "local"
    log_level: str = "INFO"
    database_url: str
    auto_create_schema: bool = False
    allowed_origins: list[str] = Field(default_factory=list)
    upload_dir: str = "../public"
    catalog_page_size: int = 10
    catalog_take: int = 12
    app_version: str = "0.1.0"

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_prefix must start with '/'.")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("catalog_page_size", "catalog_take")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Storefront API"),
        "api_prefix": os.getenv("API_PREFIX", "/api"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 8000),
        "environment": os.getenv("ENV", "local"),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "auto_create_schema": _env_bool("API_AUTO_CREATE_SCHEMA", False),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "upload_dir": os.getenv("API_UPLOAD_DIR", "../public"),
        "catalog_page_size": _env_int("API_CATALOG_PAGE_SIZE", 10),
        "catalog_take": _env_int("API_CATALOG_TAKE", 12),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }
    if not config_values["database_url"]:
        raise RuntimeError("DATABASE_URL is required for API startup.")

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
