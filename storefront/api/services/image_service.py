# This file implements product image reads and writes.
# Images are addressed by their product: update touches the first image found, delete removes them all.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select

from storefront.api.db_access import DatabaseClient
from storefront.api.models import Image
from storefront.api.services.gateway import gateway_errors

LOGGER = logging.getLogger("storefront.images")


def image_row(image: Image) -> dict[str, Any]:
    return {"image_id": image.image_id, "product_id": image.product_id, "image": image.image}


class ImageService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_images(self) -> list[dict[str, Any]]:
        with gateway_errors("Error fetching images", logger=LOGGER), self.db.session() as session:
            return [image_row(image) for image in session.scalars(select(Image)).all()]

    def images_for_product(self, product_id: str) -> list[dict[str, Any]]:
        query = select(Image).where(Image.product_id == product_id)
        with gateway_errors("Error fetching images", logger=LOGGER), self.db.session() as session:
            return [image_row(image) for image in session.scalars(query).all()]

    def create_image(self, *, product_id: str, image: str) -> dict[str, Any]:
        with gateway_errors("Error creating image", logger=LOGGER), self.db.session() as session:
            record = Image(product_id=product_id, image=image)
            session.add(record)
            session.flush()
            return image_row(record)

    def update_first_image(self, product_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        query = select(Image).where(Image.product_id == product_id).limit(1)
        with gateway_errors("Error updating image", logger=LOGGER), self.db.session() as session:
            record = session.scalars(query).first()
            if record is None:
                return None
            for key, value in changes.items():
                setattr(record, key, value)
            session.flush()
            return image_row(record)

    def delete_images_for_product(self, product_id: str) -> int:
        with gateway_errors("Error deleting image", logger=LOGGER), self.db.session() as session:
            result = session.execute(delete(Image).where(Image.product_id == product_id))
            return result.rowcount or 0
