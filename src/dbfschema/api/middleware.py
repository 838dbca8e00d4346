"""Middleware: request timing and body size limits."""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

_MAX_BODY = 1 * 1024 * 1024  # 1 MB, same as the descriptor loader limit


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Add X-Request-Duration-Ms header with processing time."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-Duration-Ms"] = f"{duration_ms:.1f}"
        return response


class RequestBodyLimitMiddleware(BaseHTTPMiddleware):
    """Reject request bodies larger than 1 MB.

    Checks the Content-Length header first (malformed values get a 400), then
    counts streamed bytes and aborts as soon as the limit is exceeded.  The
    consumed bytes are cached on ``request._body`` so downstream handlers can
    still read the body.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        too_large = JSONResponse(
            status_code=413,
            content={"detail": f"Request body too large (max {_MAX_BODY // (1024 * 1024)} MB)"},
        )

        content_length = request.headers.get("content-length")
        if content_length is not None:
            if not content_length.isdigit():
                return JSONResponse(
                    status_code=400, content={"detail": "Invalid Content-Length header"}
                )
            if int(content_length) > _MAX_BODY:
                return too_large

        if request.method in ("POST", "PUT", "PATCH"):
            chunks: list[bytes] = []
            total = 0
            async for chunk in request.stream():
                total += len(chunk)
                if total > _MAX_BODY:
                    return too_large
                chunks.append(chunk)
            request._body = b"".join(chunks)  # noqa: SLF001

        return await call_next(request)
