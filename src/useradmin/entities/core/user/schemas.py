"""Request and response models for the user endpoints."""

from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, EmailStr, Field, field_validator

from .entity import EMAIL_MAX_LENGTH, User, UserStatus

T = TypeVar("T")


def blank_to_none(value):
    """Treat empty or whitespace-only strings as an absent value."""
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def check_email_length(value: str) -> str:
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
    return value


BoundedEmail = Annotated[EmailStr, AfterValidator(check_email_length)]


class CreateUserRequest(BaseModel):
    """Payload for creating a user."""

    name: str = Field(min_length=1, max_length=50)
    email: BoundedEmail
    phone: str = Field(default="", max_length=20)

    @field_validator("phone", mode="before")
    @classmethod
    def null_phone_is_empty(cls, value):
        return "" if value is None else value


class UpdateUserRequest(BaseModel):
    """Partial update of a user's profile.

    Absent or empty fields leave the stored value untouched.
    """

    name: str | None = Field(default=None, max_length=50)
    email: BoundedEmail | None = None
    phone: str | None = Field(default=None, max_length=20)

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def empty_means_unchanged(cls, value):
        return blank_to_none(value)


class UpdateUserStatusRequest(BaseModel):
    """Enable or disable a user."""

    status: UserStatus


class ListUsersRequest(BaseModel):
    """Query parameters for the paginated user list."""

    page: int = Field(default=1, ge=1)
    size: int = Field(default=10, ge=1, le=100)
    keyword: str | None = Field(default=None, description="Substring of name or email")
    status: UserStatus | None = None

    @field_validator("keyword", "status", mode="before")
    @classmethod
    def empty_means_any(cls, value):
        return blank_to_none(value)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


class PageResult(BaseModel, Generic[T]):
    """One page of a list together with the unpaginated total."""

    list: list[T]
    total: int
    page: int
    size: int


UserPage = PageResult[User]
