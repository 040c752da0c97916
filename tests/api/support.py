# This file provides shared helpers for API endpoint tests.
# Each client gets its own app and a fresh in-memory SQLite database with the schema created.
# The helpers build consistent config objects, scoped TestClient contexts, and seed records.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from storefront.api.api_config import ApiConfig
from storefront.api.app import create_app
from storefront.api.db_access import DatabaseClient
from storefront.api.dependencies import get_config

TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"


def build_test_config(*, upload_dir: str = "../public") -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Storefront API",
        api_prefix="/api",
        host="0.0.0.0",
        port=8000,
        environment="test",
        log_level="INFO",
        database_url=TEST_DATABASE_URL,
        auto_create_schema=True,
        allowed_origins=[],
        upload_dir=upload_dir,
        catalog_page_size=10,
        catalog_take=12,
        app_version="0.1.0",
    )


class FakeDBClient:
    """Stand-in database client for readiness tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = existing_tables if existing_tables is not None else {
            "category",
            "product",
            "image",
            "customer_order",
            "customer_order_product",
        }

    def open(self) -> None:
        return None

    def close(self) -> None:
        return None

    def create_schema(self) -> None:
        return None

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


class FailingDatabaseClient(DatabaseClient):
    """Opens normally but fails every session, as an unreachable database would."""

    def __init__(self) -> None:
        super().__init__(database_url=TEST_DATABASE_URL)

    def session(self) -> Any:
        raise OperationalError("SELECT 1", {}, Exception("database is unavailable"))


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient bound to a fresh app and database."""

    resolved_config = config or build_test_config()
    resolved_db = db_client or DatabaseClient(database_url=resolved_config.database_url)
    app = create_app(config=resolved_config, db=resolved_db)
    app.dependency_overrides[get_config] = lambda: resolved_config

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


def create_category(client: TestClient, name: str = "electronics") -> dict[str, Any]:
    response = client.post("/api/categories", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


def create_product(client: TestClient, category_id: str, **overrides: Any) -> dict[str, Any]:
    slug = overrides.pop("slug", "smart-phone")
    payload: dict[str, Any] = {
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "mainImage": f"{slug}.webp",
        "price": 100,
        "description": f"Description of {slug}",
        "manufacturer": "Acme",
        "categoryId": category_id,
    }
    payload.update(overrides)
    response = client.post("/api/products", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def order_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Ana",
        "lastname": "Petrovic",
        "phone": "+381601234567",
        "email": "ana@example.com",
        "company": "",
        "adress": "Main Street 1",
        "apartment": "4",
        "postalCode": "11000",
        "status": "processing",
        "city": "Belgrade",
        "country": "Serbia",
        "orderNotice": "Ring twice",
        "total": 250,
    }
    payload.update(overrides)
    return payload


def create_order(client: TestClient, **overrides: Any) -> dict[str, Any]:
    response = client.post("/api/orders", json=order_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


def create_user(client: TestClient, email: str = "user@example.com") -> dict[str, Any]:
    response = client.post("/api/users", json={"email": email, "password": "s3cret-pass"})
    assert response.status_code == 201, response.text
    return response.json()
