# This file defines product image endpoints. `/{product_id}` addresses every image of one product.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from storefront.api.dependencies import get_image_service
from storefront.api.error_handlers import not_found
from storefront.api.schemas.image_schemas import ImageCreate, ImageRead, ImageUpdate
from storefront.api.services.image_service import ImageService

router = APIRouter(prefix="/images", tags=["images"])
ImageServiceDep = Annotated[ImageService, Depends(get_image_service)]


@router.get("", response_model=list[ImageRead])
def list_images(service: ImageServiceDep) -> list[dict[str, object]]:
    return service.list_images()


@router.post("", response_model=ImageRead, status_code=201)
def create_image(payload: ImageCreate, service: ImageServiceDep) -> dict[str, object]:
    return service.create_image(product_id=payload.product_id, image=payload.image)


@router.get("/{product_id}", response_model=list[ImageRead])
def get_product_images(product_id: str, service: ImageServiceDep) -> list[dict[str, object]]:
    return service.images_for_product(product_id)


@router.put("/{product_id}", response_model=ImageRead)
def update_product_image(
    product_id: str,
    payload: ImageUpdate,
    service: ImageServiceDep,
) -> dict[str, object]:
    image = service.update_first_image(
        product_id, payload.model_dump(exclude_unset=True, exclude_none=True)
    )
    if image is None:
        raise not_found("Image")
    return image


@router.delete("/{product_id}", status_code=204)
def delete_product_images(product_id: str, service: ImageServiceDep) -> Response:
    service.delete_images_for_product(product_id)
    return Response(status_code=204)
