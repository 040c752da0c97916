# This file defines user endpoints. Responses never include the password hash.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from storefront.api.dependencies import get_user_service
from storefront.api.error_handlers import not_found
from storefront.api.schemas.user_schemas import UserCreate, UserRead, UserUpdate
from storefront.api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])
UserServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.get("", response_model=list[UserRead])
def list_users(service: UserServiceDep) -> list[dict[str, object]]:
    return service.list_users()


@router.post("", response_model=UserRead, status_code=201)
def create_user(payload: UserCreate, service: UserServiceDep) -> dict[str, object]:
    return service.create_user(email=payload.email, password=payload.password, role=payload.role)


@router.get("/email/{email}", response_model=UserRead)
def get_user_by_email(email: str, service: UserServiceDep) -> dict[str, object]:
    user = service.get_user_by_email(email)
    if user is None:
        raise not_found("User")
    return user


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, service: UserServiceDep) -> dict[str, object]:
    user = service.get_user(user_id)
    if user is None:
        raise not_found("User")
    return user


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: str, payload: UserUpdate, service: UserServiceDep) -> dict[str, object]:
    user = service.update_user(user_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if user is None:
        raise not_found("User")
    return user


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: str, service: UserServiceDep) -> Response:
    if not service.delete_user(user_id):
        raise not_found("User")
    return Response(status_code=204)
