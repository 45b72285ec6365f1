"""Login endpoint backed by the mock authentication service."""

from fastapi import APIRouter, Depends, Request

from src.useradmin.api.http.deps import get_auth_service, get_request_logger
from src.useradmin.api.http.response import ApiResponse, ok
from src.useradmin.core.services.auth import LoginRequest, LoginResult, MockAuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=ApiResponse[LoginResult])
def login(
    body: LoginRequest,
    request: Request,
    auth_service: MockAuthService = Depends(get_auth_service),
) -> ApiResponse[LoginResult]:
    """Log in with any email and password (development placeholder)."""
    result = auth_service.login(body.email, body.password, log=get_request_logger(request))
    return ok(result)
