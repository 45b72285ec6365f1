"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity
- UserTable: Database persistence model
- UserRepository: Data access layer
- schemas: Request DTOs and the page wrapper used by the API
"""

from .entity import User, UserStatus
from .repository import AbstractUserRepository, UserRepository
from .schemas import (
    CreateUserRequest,
    ListUsersRequest,
    PageResult,
    UpdateUserRequest,
    UpdateUserStatusRequest,
    UserPage,
)
from .table import UserTable

__all__ = [
    "User",
    "UserStatus",
    "UserTable",
    "AbstractUserRepository",
    "UserRepository",
    "CreateUserRequest",
    "UpdateUserRequest",
    "UpdateUserStatusRequest",
    "ListUsersRequest",
    "PageResult",
    "UserPage",
]
