from .mock_auth import AuthUser, LoginRequest, LoginResult, MockAuthService

__all__ = ["AuthUser", "LoginRequest", "LoginResult", "MockAuthService"]
