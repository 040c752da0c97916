# This file defines wishlist endpoints.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from storefront.api.dependencies import get_wishlist_service
from storefront.api.schemas.wishlist_schemas import WishlistCreate, WishlistDetail, WishlistRead
from storefront.api.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["wishlist"])
WishlistServiceDep = Annotated[WishlistService, Depends(get_wishlist_service)]


@router.get("", response_model=list[WishlistDetail])
def list_wishlist(service: WishlistServiceDep) -> list[dict[str, object]]:
    return service.list_items()


@router.post("", response_model=WishlistRead, status_code=201)
def create_wish_item(payload: WishlistCreate, service: WishlistServiceDep) -> dict[str, object]:
    return service.create_item(user_id=payload.user_id, product_id=payload.product_id)


@router.get("/user/{user_id}", response_model=list[WishlistDetail])
def get_user_wishlist(user_id: str, service: WishlistServiceDep) -> list[dict[str, object]]:
    return service.items_for_user(user_id)


@router.get("/{user_id}/{product_id}", response_model=list[WishlistRead])
def get_wish_item(
    user_id: str,
    product_id: str,
    service: WishlistServiceDep,
) -> list[dict[str, object]]:
    return service.matching_items(user_id=user_id, product_id=product_id)


@router.delete("/{user_id}/{product_id}", status_code=204)
def delete_wish_item(user_id: str, product_id: str, service: WishlistServiceDep) -> Response:
    service.delete_items(user_id=user_id, product_id=product_id)
    return Response(status_code=204)
