"""User management use cases.

Each public method runs one use case: load what it needs, apply the
business rule, persist, and translate persistence failures into the
application error taxonomy. Raw store errors never leave this module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger as default_logger
from pydantic import ValidationError

from src.useradmin.core.errors import Internal, InvalidParam, NotFound
from src.useradmin.entities.core._base import new_id
from src.useradmin.entities.core.user import (
    AbstractUserRepository,
    CreateUserRequest,
    ListUsersRequest,
    UpdateUserRequest,
    UpdateUserStatusRequest,
    User,
    UserPage,
    UserStatus,
)

if TYPE_CHECKING:
    from loguru import Logger


class UserService:
    """Orchestrates user CRUD on top of a repository.

    Args:
        repository: Persistence backend.
        log: Request-scoped logger; diagnostics for this request go here.
    """

    def __init__(self, repository: AbstractUserRepository, log: Logger | None = None) -> None:
        self._repository = repository
        self._log = log if log is not None else default_logger

    def _load(self, user_id: str, action: str) -> User:
        try:
            user = self._repository.find_by_id(user_id)
        except Exception as e:
            self._log.error("failed to find user for {}", action, id=user_id, error=str(e))
            raise Internal from e
        if user is None:
            raise NotFound
        return user

    def _validated(self, fields: dict) -> User:
        """Build a user, rejecting values the store cannot hold."""
        try:
            return User.model_validate(fields)
        except ValidationError as e:
            self._log.info("rejected invalid user", errors=str(e.errors()))
            raise InvalidParam from e

    def create(self, req: CreateUserRequest) -> User:
        """Create an active user with a fresh id.

        No duplicate-email check happens here; a duplicate is rejected by the
        store's unique index and reported as an internal error.
        """
        self._log.info("creating user", email=req.email)

        user = self._validated(
            {
                "id": new_id(),
                "name": req.name,
                "email": req.email,
                "phone": req.phone,
                "status": UserStatus.ACTIVE,
            }
        )
        try:
            return self._repository.save(user)
        except Exception as e:
            self._log.error("failed to create user", email=req.email, error=str(e))
            raise Internal from e

    def get_by_id(self, user_id: str) -> User:
        return self._load(user_id, "get")

    def update(self, user_id: str, req: UpdateUserRequest) -> None:
        """Overwrite only the fields present in ``req``."""
        user = self._load(user_id, "update")

        changes = {
            field: value
            for field, value in req.model_dump(include={"name", "email", "phone"}).items()
            if value
        }
        user = self._validated({**user.model_dump(), **changes})

        try:
            self._repository.update(user)
        except Exception as e:
            self._log.error("failed to update user", id=user_id, error=str(e))
            raise Internal from e

    def update_status(self, user_id: str, req: UpdateUserStatusRequest) -> None:
        user = self._load(user_id, "status update")
        user.status = req.status

        try:
            self._repository.update(user)
        except Exception as e:
            self._log.error("failed to update user status", id=user_id, error=str(e))
            raise Internal from e
        self._log.info("user status updated", id=user_id, status=req.status.value)

    def delete(self, user_id: str) -> None:
        """Soft-delete a user after confirming it exists."""
        self._load(user_id, "delete")

        try:
            self._repository.delete(user_id)
        except Exception as e:
            self._log.error("failed to delete user", id=user_id, error=str(e))
            raise Internal from e
        self._log.info("user deleted", id=user_id)

    def list(self, req: ListUsersRequest) -> UserPage:
        try:
            users, total = self._repository.list(req)
        except Exception as e:
            self._log.error("failed to list users", error=str(e))
            raise Internal from e
        return UserPage(list=users, total=total, page=req.page, size=req.size)
