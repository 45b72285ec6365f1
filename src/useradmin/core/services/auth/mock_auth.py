"""Placeholder login used while real authentication is not implemented.

Nothing here verifies credentials. Any email/password pair is accepted and
granted every permission; do not treat this as a security boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger as default_logger
from pydantic import BaseModel, EmailStr, Field

if TYPE_CHECKING:
    from loguru import Logger

ALL_PERMISSIONS = "*"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthUser(BaseModel):
    id: str
    name: str
    avatar: str = ""
    permissions: list[str] = Field(default_factory=list)


class LoginResult(BaseModel):
    token: str
    user: AuthUser


class MockAuthService:
    """Accepts every login and returns an administrator profile."""

    token_prefix = "dev-token-"

    def login(self, email: str, password: str, log: Logger | None = None) -> LoginResult:
        log = log if log is not None else default_logger
        log.warning("mock authentication accepted login without verification", email=email)
        return LoginResult(
            token=f"{self.token_prefix}{email}",
            user=AuthUser(
                id="1",
                name="Administrator",
                avatar="",
                permissions=[ALL_PERMISSIONS],
            ),
        )
