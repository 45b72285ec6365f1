"""FastAPI application factory and setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.useradmin.api.http.app_data import ApplicationDependencies
from src.useradmin.api.http.deps import get_request_logger
from src.useradmin.api.http.middleware.cors import CORSHeadersMiddleware
from src.useradmin.api.http.middleware.tracing import TRACE_HEADER, RequestTracingMiddleware
from src.useradmin.api.http.response import error_response
from src.useradmin.api.http.routers.auth import router as auth_router
from src.useradmin.api.http.routers.health import router as health_router
from src.useradmin.api.http.routers.users import router as users_router
from src.useradmin.api.utils.app_startup import configure_logging
from src.useradmin.core.errors import AppError, InvalidParam
from src.useradmin.core.services import DbManageService, DbSessionService, MockAuthService
from src.useradmin.runtime.context import get_config

# Initialize logging
configure_logging()


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    if getattr(app.state, "app_dependencies", None) is None:
        app.state.app_dependencies = ApplicationDependencies(
            database_service=DbSessionService(),
            auth_service=MockAuthService(),
        )
    deps: ApplicationDependencies = app.state.app_dependencies

    if config.database.auto_migrate:
        DbManageService(deps.database_service.engine).create_all()


async def shutdown() -> None:
    logger.info("Shutting down application")
    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is not None:
        deps.database_service.dispose()


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="User Admin API",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

# expose startup for tests
__all__ = ["app", "startup", "shutdown"]

# Added last so it runs first: pre-flights never reach tracing or routing
app.add_middleware(RequestTracingMiddleware)
app.add_middleware(CORSHeadersMiddleware, cors=get_config().app.cors)


# --- Error rendering ---
def _trace_headers(request: Request) -> dict[str, str] | None:
    trace_id = getattr(request.state, "trace_id", None)
    return {TRACE_HEADER: trace_id} if trace_id else None


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError):
    log = get_request_logger(request)
    if exc.__cause__ is not None:
        log.opt(exception=exc.__cause__).debug("{} caused by store error", type(exc).__name__)
    return error_response(exc, headers=_trace_headers(request))


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    get_request_logger(request).info("request validation failed", errors=str(exc.errors()))
    return error_response(InvalidParam, headers=_trace_headers(request))


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException):
    return error_response(AppError.for_status(exc.status_code), headers=_trace_headers(request))


# --- Router registration ---
api_prefix = get_config().app.api_prefix
app.include_router(auth_router, prefix=api_prefix)
app.include_router(users_router, prefix=api_prefix)
app.include_router(health_router)


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host=config.app.host,
        port=config.app.port,
        access_log=False,  # We handle access logging in middleware
    )
