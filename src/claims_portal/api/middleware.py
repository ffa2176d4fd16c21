"""ASGI middleware for the development backend."""

from __future__ import annotations

import time

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request: method, path, status and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "{method} {path} → {status} ({ms:.0f}ms)",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            ms=(time.perf_counter() - started) * 1000,
        )
        return response


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """Turn unhandled exceptions into a 500 with the claims API error body."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.opt(exception=exc).error(
                "Unhandled exception on {method} {path}",
                method=request.method,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error", "details": str(exc)},
            )
