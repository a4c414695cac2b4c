"""HTTP Middleware — request logging and single-origin CORS enforcement.

Invariants:
    - Every request produces exactly one access log line (method, path, status, duration)
    - A request carrying an Origin header other than the configured frontend or the
      server's own origin is answered 403 {"message": "Not allowed by CORS"}
    - Requests without an Origin header (curl, server-to-server, tests) pass

Design Decisions:
    - Origin gate sits outside CORSMiddleware: CORSMiddleware only withholds headers
      from foreign origins, the gate refuses them outright
    - Same-origin requests pass so the bundled /docs UI can call the API
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from products_api.core.errors import OriginNotAllowedError

logger = logging.getLogger("products_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{request.method} {request.url.path} failed: {exc}",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{duration_ms:.1f} ms",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response


class OriginGateMiddleware(BaseHTTPMiddleware):
    """Reject cross-origin requests from anything but the allowed origin."""

    def __init__(self, app, allowed_origin: str):
        super().__init__(app)
        self.allowed_origin = allowed_origin

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")
        if origin is None or self._is_allowed(origin, request):
            return await call_next(request)

        error = OriginNotAllowedError(origin)
        logger.warning(
            f"Rejected origin {origin}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )

    def _is_allowed(self, origin: str, request: Request) -> bool:
        origin = origin.rstrip("/")
        own_origin = f"{request.url.scheme}://{request.url.netloc}"
        return origin in (self.allowed_origin, own_origin)
