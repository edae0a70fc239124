from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter
from requests.auth import HTTPBasicAuth

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import DecodeError, TransportError
from .logging_utils import log_json

logger = logging.getLogger(__name__)

PARTNER_HEADER = "x-partner"

ResponseHook = Callable[[requests.Response], None]
RequestHook = Callable[[str, str, dict[str, Any]], None]


@dataclass
class LastOperation:
    module: str
    operation: str
    duration_ms: int
    result: str
    status_code: int | None = None


@dataclass
class HttpClient:
    config: ClientConfig
    session: requests.Session | None = None
    before_request: RequestHook | None = None
    after_response: ResponseHook | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)
        self.session.auth = HTTPBasicAuth(self.config.api_key, self.config.api_secret)

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def _default_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.partner_key:
            headers[PARTNER_HEADER] = self.config.partner_key
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | list[Any] | None = None,
        params: dict[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = self._default_headers()
        if headers:
            request_headers.update(headers)

        normalized_method = method.upper()
        url = self._build_url(path)
        request_context = {
            "headers": request_headers,
            "json_body": json_body,
            "params": params,
        }
        if self.before_request:
            self.before_request(normalized_method, url, request_context)
        log_json(
            logger,
            {"event": "request", "method": normalized_method, "url": url, "module": module, "operation": operation},
            level=logging.DEBUG,
        )

        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=params,
                timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record_operation(module, operation, started, "transport_error", None)
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc),
                details={"type": type(exc).__name__},
                status_code=0,
                raw_payload=None,
            ) from exc

        if self.after_response:
            self.after_response(response)
        if response.ok:
            if not response.content:
                self._record_operation(module, operation, started, "success", response.status_code)
                return None
            try:
                parsed = response.json()
            except ValueError as exc:
                self._record_operation(module, operation, started, "decode_error", response.status_code)
                raise DecodeError(
                    code="INVALID_JSON",
                    message=f"Response from {normalized_method} {path} is not valid JSON",
                    details={"content_type": response.headers.get("Content-Type")},
                    status_code=response.status_code,
                    raw_payload=response.text,
                ) from exc
            self._record_operation(module, operation, started, "success", response.status_code)
            return parsed

        payload = None
        try:
            payload = response.json()
        except ValueError:
            payload = {"message": response.text}
        if not isinstance(payload, dict):
            payload = {"message": json.dumps(payload)}
        self._record_operation(module, operation, started, "error", response.status_code)
        raise map_error(response.status_code, payload, normalized_method)

    def close(self) -> None:
        if self.session is not None:
            self.session.close()

    def _record_operation(
        self,
        module: str,
        operation: str,
        started: float,
        result: str,
        status_code: int | None,
    ) -> None:
        self.last_operation = LastOperation(
            module=module,
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            status_code=status_code,
        )
        log_json(
            logger,
            {
                "event": "response",
                "module": module,
                "operation": operation,
                "status_code": status_code,
                "duration_ms": self.last_operation.duration_ms,
                "result": result,
            },
        )
