# This file keeps the short `/slugs/{slug}` and `/search` paths that older storefront pages still call.
# Both delegate to the product handlers' helpers so behaviour stays identical.

from __future__ import annotations

from fastapi import APIRouter, Query

from storefront.api.routers.products import ProductServiceDep, product_by_slug, search_catalog
from storefront.api.schemas.product_schemas import ProductRead

router = APIRouter(tags=["products"])


@router.get("/slugs/{slug}", response_model=ProductRead)
def get_slug(slug: str, service: ProductServiceDep) -> dict[str, object]:
    return product_by_slug(service, slug)


@router.get("/search", response_model=list[ProductRead], response_model_exclude_none=True)
def search(
    service: ProductServiceDep,
    query: str | None = Query(default=None),
) -> list[dict[str, object]]:
    return search_catalog(service, query)
