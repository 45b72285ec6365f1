"""User domain entity."""

from enum import Enum
from typing import Any

from pydantic import Field

from src.useradmin.entities.core._base import Entity


EMAIL_MAX_LENGTH = 100


class UserStatus(str, Enum):
    """Whether a user account is enabled."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class User(Entity):
    """User entity representing a person managed by the admin API.

    This is the domain model handed between service and repository and
    rendered to clients. Soft-deleted users never become entities, so there
    is no deletion marker here.
    """

    name: str = Field(min_length=1, max_length=50, description="Display name")
    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH, description="Email address, unique among live users")
    phone: str = Field(default="", max_length=20, description="Phone number")
    status: UserStatus = Field(default=UserStatus.ACTIVE, description="Account status")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.email == other.email
            and self.phone == other.phone
            and self.status == other.status
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.email,
            self.phone,
            self.status,
        ))
