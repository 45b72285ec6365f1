"""Permissive CORS handling for browser clients."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.useradmin.runtime.config.config_data import CORSConfig


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Attach CORS headers to every response and answer pre-flights.

    Any ``OPTIONS`` request gets an empty 204 without reaching the routers.
    """

    def __init__(self, app: ASGIApp, cors: CORSConfig | None = None) -> None:
        super().__init__(app)
        cors = cors or CORSConfig()
        self._headers = {
            "Access-Control-Allow-Origin": ", ".join(cors.origins),
            "Access-Control-Allow-Methods": ", ".join(cors.allow_methods),
            "Access-Control-Allow-Headers": ", ".join(cors.allow_headers),
            "Access-Control-Max-Age": str(cors.max_age),
        }

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=self._headers)

        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers[name] = value
        return response
