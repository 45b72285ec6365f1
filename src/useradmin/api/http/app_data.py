from dataclasses import dataclass

from src.useradmin.core.services import DbSessionService, MockAuthService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    auth_service: MockAuthService
