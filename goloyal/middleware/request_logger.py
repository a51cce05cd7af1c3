"""HTTP middleware that logs API requests with timing."""

import time
from typing import Callable

import structlog
from fastapi import Request, Response

logger = structlog.get_logger()

API_PREFIX = "/api"
SLOW_REQUEST_MS = 1000
MAX_LOGGED_BODY = 200
MAX_LOGGED_USER_AGENT = 100


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


async def request_logger_middleware(request: Request, call_next: Callable) -> Response:
    """Log every /api request once the response is ready.

    Errors and slow requests get a second, detailed entry including a
    truncated copy of the response body.
    """
    if not request.url.path.startswith(API_PREFIX):
        return await call_next(request)

    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        duration_ms = round((time.perf_counter() - start) * 1000)
        logger.error(
            "api_request",
            method=request.method,
            path=request.url.path,
            status_code=500,
            duration_ms=duration_ms,
        )
        raise

    duration_ms = round((time.perf_counter() - start) * 1000)
    logger.info(
        "api_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=duration_ms,
    )

    if response.status_code < 400 and duration_ms <= SLOW_REQUEST_MS:
        return response

    # Buffer the body so it can be logged and still sent
    body = b""
    async for chunk in response.body_iterator:
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

    user_agent = request.headers.get("user-agent", "")
    logger.warning(
        "api_request_details",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=duration_ms,
        ip=request.client.host if request.client else None,
        user_agent=user_agent[:MAX_LOGGED_USER_AGENT],
        response=_truncate(body.decode("utf-8", errors="replace"), MAX_LOGGED_BODY),
    )

    rebuilt = Response(content=body, status_code=response.status_code)
    # Keep repeated headers such as set-cookie
    rebuilt.raw_headers = list(response.raw_headers)
    return rebuilt
