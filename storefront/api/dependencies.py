# This file provides dependency factories for FastAPI routes.
# The database client lives on `app.state`, created with the application and opened at startup,
# so each request builds its service around the one shared client.
# Tests swap the config or client through `app.dependency_overrides`.

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from storefront.api.api_config import ApiConfig, get_api_config
from storefront.api.db_access import DatabaseClient
from storefront.api.services.category_service import CategoryService
from storefront.api.services.image_service import ImageService
from storefront.api.services.order_product_service import OrderProductService
from storefront.api.services.order_service import OrderService
from storefront.api.services.product_service import ProductService
from storefront.api.services.upload_service import UploadService
from storefront.api.services.user_service import UserService
from storefront.api.services.wishlist_service import WishlistService


def get_config() -> ApiConfig:
    return get_api_config()


def get_database_client(request: Request) -> DatabaseClient:
    return request.app.state.db


ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def get_category_service(db: DBDep) -> CategoryService:
    return CategoryService(db=db)


def get_product_service(config: ConfigDep, db: DBDep) -> ProductService:
    return ProductService(config=config, db=db)


def get_order_service(db: DBDep) -> OrderService:
    return OrderService(db=db)


def get_order_product_service(db: DBDep) -> OrderProductService:
    return OrderProductService(db=db)


def get_image_service(db: DBDep) -> ImageService:
    return ImageService(db=db)


def get_wishlist_service(db: DBDep) -> WishlistService:
    return WishlistService(db=db)


def get_user_service(db: DBDep) -> UserService:
    return UserService(db=db)


def get_upload_service(config: ConfigDep) -> UploadService:
    return UploadService(config=config)
