"""Core services exports."""

# Auth Services
from .auth.mock_auth import MockAuthService

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# User Services
from .user.user_service import UserService

__all__ = [
    # Auth Services
    "MockAuthService",
    # Database Services
    "DbManageService",
    "DbSessionService",
    # User Services
    "UserService",
]
