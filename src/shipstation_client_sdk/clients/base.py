from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestExecutor(Protocol):
    def request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | list[Any] | None = None,
        params: dict[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None: ...


@dataclass
class BaseClient:
    http: RequestExecutor
    resource: str = ""

    def _path(self, *parts: object) -> str:
        segments = [self.resource.strip("/")] + [str(part).strip("/") for part in parts]
        return "/".join(segment for segment in segments if segment)

    def _request(self, method: str, *parts: object, **kwargs: Any):
        kwargs.setdefault("module", self.resource or "unknown")
        return self.http.request(method, self._path(*parts), **kwargs)

    def _decode(self, model_type: type[ModelT], data: Any, what: str) -> ModelT:
        if not isinstance(data, dict):
            raise DecodeError(
                code="UNEXPECTED_SHAPE",
                message=f"Expected {what} response to be a JSON object",
                details={"type": type(data).__name__},
                status_code=200,
                raw_payload=data,
            )
        try:
            return model_type.model_validate(data)
        except PydanticValidationError as exc:
            raise _decode_error(what, exc, data) from exc

    def _decode_list(self, model_type: type[ModelT], data: Any, what: str) -> list[ModelT]:
        if not isinstance(data, list):
            raise DecodeError(
                code="UNEXPECTED_SHAPE",
                message=f"Expected {what} response to be a JSON array",
                details={"type": type(data).__name__},
                status_code=200,
                raw_payload=data,
            )
        try:
            return [model_type.model_validate(item) for item in data]
        except PydanticValidationError as exc:
            raise _decode_error(what, exc, data) from exc


def _decode_error(what: str, exc: PydanticValidationError, data: Any) -> DecodeError:
    return DecodeError(
        code="SCHEMA_MISMATCH",
        message=f"{what} response does not match the expected schema",
        details=exc.errors(include_url=False),
        status_code=200,
        raw_payload=data,
    )
