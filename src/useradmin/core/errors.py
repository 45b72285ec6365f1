"""Application error taxonomy.

Every error returned to clients is one of the classes defined here. Each
carries the HTTP status to respond with, a numeric business code distinct
from that status, and a message safe to show to the caller. Raise the class
(``raise NotFound``); the cause goes in ``from``, never in the message.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for errors rendered directly into the response envelope."""

    http_status: int = 500
    code: int = 50000
    message: str = "internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(http_status={self.http_status}, code={self.code}, message={self.message!r})"

    @staticmethod
    def for_status(http_status: int) -> type[AppError]:
        """Map a bare HTTP status raised by the framework onto the taxonomy."""
        if http_status in _BY_STATUS:
            return _BY_STATUS[http_status]
        if 400 <= http_status < 500:
            return InvalidParam
        return Internal


class InvalidParam(AppError):
    """The request failed shape or field validation."""

    http_status = 400
    code = 40001
    message = "invalid parameters"


class Unauthorized(AppError):
    """Credentials are missing or invalid."""

    http_status = 401
    code = 40100
    message = "unauthorized"


class Forbidden(AppError):
    """The caller lacks the privilege for this operation."""

    http_status = 403
    code = 40300
    message = "forbidden"


class NotFound(AppError):
    """The entity does not exist or has been soft-deleted."""

    http_status = 404
    code = 40400
    message = "resource not found"


class Internal(AppError):
    """Any unexpected failure; details stay in the logs."""

    http_status = 500
    code = 50000
    message = "internal server error"


_BY_STATUS: dict[int, type[AppError]] = {
    err.http_status: err
    for err in (InvalidParam, Unauthorized, Forbidden, NotFound, Internal)
}

__all__ = [
    "AppError",
    "InvalidParam",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "Internal",
]
