# This file defines category endpoints.
# Handlers stay thin: validation happens in the request schemas and data access in the service.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from storefront.api.dependencies import get_category_service
from storefront.api.error_handlers import not_found
from storefront.api.schemas.category_schemas import CategoryCreate, CategoryRead, CategoryUpdate
from storefront.api.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]


@router.get("", response_model=list[CategoryRead])
def list_categories(service: CategoryServiceDep) -> list[dict[str, object]]:
    return service.list_categories()


@router.post("", response_model=CategoryRead, status_code=201)
def create_category(payload: CategoryCreate, service: CategoryServiceDep) -> dict[str, object]:
    return service.create_category(name=payload.name)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: str, service: CategoryServiceDep) -> dict[str, object]:
    category = service.get_category(category_id)
    if category is None:
        raise not_found("Category")
    return category


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: str,
    payload: CategoryUpdate,
    service: CategoryServiceDep,
) -> dict[str, object]:
    category = service.update_category(category_id, name=payload.name)
    if category is None:
        raise not_found("Category")
    return category


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: str, service: CategoryServiceDep) -> Response:
    if not service.delete_category(category_id):
        raise not_found("Category")
    return Response(status_code=204)
