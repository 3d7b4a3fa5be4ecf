from fastapi import Request
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app")

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One line per request; server errors are logged as warnings"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        client = request.client.host if request.client else "-"

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"{client} {request.method} {target} -> {response.status_code} ({elapsed_ms:.1f}ms)",
        )
        return response
