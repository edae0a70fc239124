from __future__ import annotations

from dataclasses import dataclass

from .clients.stores_client import StoresClient
from .config import ClientConfig
from .http_client import HttpClient


@dataclass
class ApiSession:
    config: ClientConfig
    http: HttpClient | None = None

    def __post_init__(self) -> None:
        self.http = self.http or HttpClient(config=self.config)

    def stores_client(self) -> StoresClient:
        return StoresClient(http=self.http)

    def close(self) -> None:
        if self.http is not None:
            self.http.close()

    def __enter__(self) -> "ApiSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
