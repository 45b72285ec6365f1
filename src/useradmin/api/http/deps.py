"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from fastapi import Depends, Request
from loguru import logger
from sqlmodel import Session

from src.useradmin.api.http.app_data import ApplicationDependencies
from src.useradmin.core.services import DbSessionService, MockAuthService, UserService
from src.useradmin.entities.core.user import AbstractUserRepository, UserRepository

if TYPE_CHECKING:
    from loguru import Logger


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the process-wide dependencies built at startup."""
    return request.app.state.app_dependencies


def get_database_service(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> DbSessionService:
    """Get the database session service."""
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    with database_service.session_scope() as session:
        yield session


def get_request_logger(request: Request) -> Logger:
    """Get the logger bound to the current request's trace id."""
    return getattr(request.state, "logger", logger)


def get_auth_service(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> MockAuthService:
    """Get the authentication service instance."""
    return app_deps.auth_service


def get_user_repository(db: Session = Depends(get_db_session)) -> AbstractUserRepository:
    """Get a user repository bound to the request's session."""
    return UserRepository(db)


def get_user_service(
    request: Request,
    repository: AbstractUserRepository = Depends(get_user_repository),
) -> UserService:
    """Get the user service for the current request."""
    return UserService(repository, get_request_logger(request))
