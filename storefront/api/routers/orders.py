# This file defines customer order endpoints.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from storefront.api.dependencies import get_order_service
from storefront.api.error_handlers import not_found
from storefront.api.schemas.order_schemas import OrderCreate, OrderRead, OrderUpdate
from storefront.api.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]


@router.get("", response_model=list[OrderRead])
def list_orders(service: OrderServiceDep) -> list[dict[str, object]]:
    return service.list_orders()


@router.post("", response_model=OrderRead, status_code=201)
def create_order(payload: OrderCreate, service: OrderServiceDep) -> dict[str, object]:
    return service.create_order(payload.model_dump())


@router.get("/{order_id}", response_model=OrderRead)
def get_order(order_id: str, service: OrderServiceDep) -> dict[str, object]:
    order = service.get_order(order_id)
    if order is None:
        raise not_found("Order")
    return order


@router.put("/{order_id}", response_model=OrderRead)
def update_order(order_id: str, payload: OrderUpdate, service: OrderServiceDep) -> dict[str, object]:
    order = service.update_order(order_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if order is None:
        raise not_found("Order")
    return order


@router.delete("/{order_id}", status_code=204)
def delete_order(order_id: str, service: OrderServiceDep) -> Response:
    if not service.delete_order(order_id):
        raise not_found("Order")
    return Response(status_code=204)
