from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: object | None
    status_code: int
    raw_payload: object | None = None

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.code}: {self.message}"


class UnauthorizedError(ApiError):
    """401: bad or missing API key/secret."""


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ValidationError(ApiError):
    """The service rejected the request payload or parameters."""


class ConflictError(ApiError):
    pass


class RateLimitError(ApiError):
    """429 throttling error."""


class ServiceError(ApiError):
    """5xx server-side failures."""


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class DecodeError(ApiError):
    """Response body is not JSON or does not match the expected schema."""
