"""Request logging middleware for the ledger API.

Assigns each request a short id (stored on request.state and echoed in the
ApiResponse envelope and the X-Request-ID header) and logs one line per
request with the pool it targeted and the authenticated principal, if any.

Log format:
    INFO POST /api/v1/pools/P/borrow pool=P principal=bob → 200 (3ms) req_a1b2c3d4e5f6
"""

import logging
import re
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.pl_common.response import new_request_id

logger = logging.getLogger("pl.request")

_POOL_PATH = re.compile(r"/pools/([^/]+)")


def pool_id_of(path: str) -> str:
    """Pool id addressed by a /pools/{pool_id}/... or /admin/pools/{pool_id} path."""
    match = _POOL_PATH.search(path)
    return match.group(1) if match else "-"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = new_request_id()
        request.state.request_id = request_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        # Filled in by get_current_principal once the token is verified
        principal = getattr(request.state, "principal", None) or "-"
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            "%s %s pool=%s principal=%s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            pool_id_of(request.url.path),
            principal,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        response.headers["X-Request-ID"] = request_id
        return response
