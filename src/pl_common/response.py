"""Ledger API envelope.

Every endpoint answers with an ApiResponse. A failure carries both the numeric
AppError code and its tag (e.g. "InsufficientLiquidity"), so a client can
branch on either without parsing the message:
{
    "code": 2003,
    "message": "Insufficient pool liquidity: ...",
    "error": "InsufficientLiquidity",   // null on success
    "data": null,
    "timestamp": "...",
    "request_id": "req_..."             // same id as the request log line
}
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field
from starlette.requests import Request

from src.pl_common.datetime_utils import utc_now
from src.pl_common.errors import AppError


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    error: str | None = None
    data: Any = None
    timestamp: str = Field(default_factory=lambda: utc_now().isoformat())
    request_id: str = Field(default_factory=new_request_id)


def _request_id(request: Request | None) -> str:
    # Set by RequestLogMiddleware; absent when a handler is called directly
    if request is not None:
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            return str(request_id)
    return new_request_id()


def success_response(data: Any = None, request: Request | None = None) -> ApiResponse:
    return ApiResponse(data=data, request_id=_request_id(request))


def error_response(exc: AppError, request: Request | None = None) -> ApiResponse:
    return ApiResponse(
        code=exc.code,
        message=exc.message,
        error=exc.error_name,
        request_id=_request_id(request),
    )
