"""User API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.useradmin.api.http.deps import get_user_service
from src.useradmin.api.http.response import ApiResponse, ok
from src.useradmin.core.services import UserService
from src.useradmin.entities.core.user import (
    CreateUserRequest,
    ListUsersRequest,
    UpdateUserRequest,
    UpdateUserStatusRequest,
    User,
    UserPage,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=ApiResponse[User], response_model_exclude_none=True)
def create_user(
    body: CreateUserRequest,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Create a new user."""
    return ok(service.create(body))


@router.get("", response_model=ApiResponse[UserPage], response_model_exclude_none=True)
def list_users(
    query: Annotated[ListUsersRequest, Query()],
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserPage]:
    """List users page by page, optionally filtered by keyword and status."""
    return ok(service.list(query))


@router.get("/{user_id}", response_model=ApiResponse[User], response_model_exclude_none=True)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Get a user by ID."""
    return ok(service.get_by_id(user_id))


@router.put("/{user_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def update_user(
    user_id: str,
    body: UpdateUserRequest,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[None]:
    """Update the non-empty fields of a user."""
    service.update(user_id, body)
    return ok()


@router.put(
    "/{user_id}/status",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
def update_user_status(
    user_id: str,
    body: UpdateUserStatusRequest,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[None]:
    """Enable or disable a user."""
    service.update_status(user_id, body)
    return ok()


@router.delete("/{user_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[None]:
    """Soft-delete a user."""
    service.delete(user_id)
    return ok()
