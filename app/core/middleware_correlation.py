from typing_extensions import override
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from starlette.requests import Request
from starlette.responses import Response
from typing import Callable
from collections.abc import Awaitable

from app.core.logging import get_logger


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with a correlation id.
    - Reuses the incoming header value, or generates a UUID4
    - Sets `request.state.correlation_id`
    - Echoes the id back in the response header
    - Logs one access line per request
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name: str = header_name

    @override
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        corr_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.correlation_id = corr_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        get_logger(__name__, request).info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        response.headers[self.header_name] = corr_id
        return response
