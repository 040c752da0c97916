# This file defines the order-product link endpoints.
# GET and DELETE on `/{id}` take a customer order id; PUT takes the id of a single link.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from storefront.api.dependencies import get_order_product_service
from storefront.api.error_handlers import not_found
from storefront.api.schemas.order_product_schemas import (
    OrderGroup,
    OrderProductCreate,
    OrderProductDetail,
    OrderProductRead,
    OrderProductUpdate,
)
from storefront.api.services.order_product_service import OrderProductService

router = APIRouter(prefix="/order-product", tags=["order-product"])
OrderProductServiceDep = Annotated[OrderProductService, Depends(get_order_product_service)]


@router.get("", response_model=list[OrderGroup])
def list_order_products(service: OrderProductServiceDep) -> list[dict[str, object]]:
    return service.grouped_by_order()


@router.post("", response_model=OrderProductRead, status_code=201)
def create_order_product(
    payload: OrderProductCreate,
    service: OrderProductServiceDep,
) -> dict[str, object]:
    return service.create_link(payload.model_dump())


@router.get("/{customer_order_id}", response_model=list[OrderProductDetail])
def get_order_products(
    customer_order_id: str,
    service: OrderProductServiceDep,
) -> list[dict[str, object]]:
    return service.links_for_order(customer_order_id)


@router.put("/{link_id}", response_model=OrderProductRead)
def update_order_product(
    link_id: str,
    payload: OrderProductUpdate,
    service: OrderProductServiceDep,
) -> dict[str, object]:
    link = service.update_link(link_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if link is None:
        raise not_found("Order")
    return link


@router.delete("/{customer_order_id}", status_code=204)
def delete_order_products(customer_order_id: str, service: OrderProductServiceDep) -> Response:
    service.delete_links_for_order(customer_order_id)
    return Response(status_code=204)
