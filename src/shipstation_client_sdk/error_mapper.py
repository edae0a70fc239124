from __future__ import annotations

from typing import Mapping

from .exceptions import (
    ApiError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServiceError,
    UnauthorizedError,
    ValidationError,
)


def _first(payload: Mapping[str, object], *keys: str) -> object | None:
    for key in keys:
        value = payload.get(key)
        if value:
            return value
    return None


_READ_METHODS = {"GET", "HEAD"}


def map_error(status_code: int, payload: Mapping[str, object] | None, method: str = "GET") -> ApiError:
    # ShipStation errors look like {"Message": ..., "ExceptionMessage": ..., "ExceptionType": ...}
    payload = payload or {}
    code = str(_first(payload, "ExceptionType", "code") or "HTTP_ERROR")
    message = str(_first(payload, "ExceptionMessage", "Message", "message") or "Request failed")
    details = _first(payload, "ModelState", "details")
    mapped: type[ApiError]
    if status_code == 401:
        mapped = UnauthorizedError
    elif status_code == 403:
        mapped = ForbiddenError
    elif status_code == 404:
        mapped = NotFoundError
    elif status_code in {400, 422}:
        mapped = ValidationError
    elif status_code == 409:
        mapped = ConflictError
    elif status_code == 429:
        mapped = RateLimitError
    elif status_code >= 500:
        mapped = ServiceError
    elif 400 <= status_code < 500 and method.upper() not in _READ_METHODS:
        # Any other 4xx on a write means the service refused the payload.
        mapped = ValidationError
    else:
        mapped = ApiError
    return mapped(
        code=code,
        message=message,
        details=details,
        status_code=status_code,
        raw_payload=dict(payload),
    )
