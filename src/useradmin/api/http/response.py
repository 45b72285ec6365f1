"""Uniform response envelope.

Every API response body is ``{"code": int, "message": str, "data": ...}``.
``code`` is 0 on success; ``data`` is left out when there is nothing to
return and on every error.
"""

from typing import Generic, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from starlette.responses import JSONResponse

from src.useradmin.core.errors import AppError

T = TypeVar("T")

SUCCESS_CODE = 0
SUCCESS_MESSAGE = "ok"


class ApiResponse(BaseModel, Generic[T]):
    code: int = SUCCESS_CODE
    message: str = SUCCESS_MESSAGE
    data: T | None = None


def ok(data: T | None = None) -> ApiResponse[T]:
    """Wrap a successful result."""
    return ApiResponse(data=data)


def error_response(
    error: AppError | type[AppError],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render an application error with its HTTP status and business code."""
    return JSONResponse(
        status_code=error.http_status,
        content=jsonable_encoder({"code": error.code, "message": error.message}),
        headers=headers,
    )
