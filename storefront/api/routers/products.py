# This file defines product endpoints, including the paginated catalog listing and search.
# The listing hands the raw query string to the service, which parses sort and filter tokens from it.
# Static paths (`/search`, `/slug/{slug}`) are registered before `/{product_id}` so they are matched first.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from storefront.api.dependencies import get_product_service
from storefront.api.error_handlers import APIError, not_found
from storefront.api.schemas.product_schemas import ProductCreate, ProductRead, ProductUpdate
from storefront.api.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]


def search_catalog(service: ProductService, query: str | None) -> list[dict[str, object]]:
    if not query:
        raise APIError(
            status_code=400,
            error_code="MISSING_QUERY",
            message="Query parameter is required",
        )
    return service.search_products(term=query)


def product_by_slug(service: ProductService, slug: str) -> dict[str, object]:
    product = service.get_product_by_slug(slug)
    if product is None:
        raise not_found("Product")
    return product


@router.get("", response_model=list[ProductRead], response_model_exclude_none=True)
def list_products(
    request: Request,
    service: ProductServiceDep,
    mode: str | None = Query(default=None),
    page: str | None = Query(default=None),
) -> list[dict[str, object]]:
    if mode == "admin":
        return service.list_all_products()
    return service.list_products(raw_page=page, raw_query=request.url.query)


@router.post("", response_model=ProductRead, response_model_exclude_none=True, status_code=201)
def create_product(payload: ProductCreate, service: ProductServiceDep) -> dict[str, object]:
    return service.create_product(payload.model_dump())


@router.get("/search", response_model=list[ProductRead], response_model_exclude_none=True)
def search_products(
    service: ProductServiceDep,
    query: str | None = Query(default=None),
) -> list[dict[str, object]]:
    return search_catalog(service, query)


@router.get("/slug/{slug}", response_model=ProductRead)
def get_product_by_slug(slug: str, service: ProductServiceDep) -> dict[str, object]:
    return product_by_slug(service, slug)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: str, service: ProductServiceDep) -> dict[str, object]:
    product = service.get_product(product_id)
    if product is None:
        raise not_found("Product")
    return product


@router.put("/{product_id}", response_model=ProductRead, response_model_exclude_none=True)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    service: ProductServiceDep,
) -> dict[str, object]:
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    product = service.update_product(product_id, changes)
    if product is None:
        raise not_found("Product")
    return product


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: str, service: ProductServiceDep) -> Response:
    if not service.delete_product(product_id):
        raise not_found("Product")
    return Response(status_code=204)
