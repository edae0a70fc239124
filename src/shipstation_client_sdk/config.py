from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://ssapi.shipstation.com"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_secret: str = field(repr=False)
    api_base_url: str = DEFAULT_API_BASE_URL
    partner_key: str | None = field(default=None, repr=False)
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 30.0
    max_connections: int = 10
    verify_ssl: bool = True


def _require(values: dict[str, str | None], required: Iterable[str]) -> None:
    missing = [key for key in required if not values.get(key)]
    if missing:
        raise ConfigError(f"Missing required config values: {', '.join(missing)}")


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    api_base_url = (
        (os.getenv("SHIPSTATION_API_BASE_URL") or "").strip()
        or DEFAULT_API_BASE_URL
    )
    api_key = (os.getenv("SHIPSTATION_API_KEY") or "").strip()
    api_secret = (os.getenv("SHIPSTATION_API_SECRET") or "").strip()
    partner_key = (os.getenv("SHIPSTATION_PARTNER_KEY") or "").strip() or None

    timeout_seconds = _read_float("SHIPSTATION_TIMEOUT_SECONDS", "30")
    _validate(
        timeout_seconds > 0,
        f"Invalid SHIPSTATION_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    connect_timeout_seconds = _read_float(
        "SHIPSTATION_CONNECT_TIMEOUT_SECONDS", str(min(timeout_seconds, 5.0))
    )
    _validate(
        connect_timeout_seconds > 0,
        (
            "Invalid SHIPSTATION_CONNECT_TIMEOUT_SECONDS: "
            f"expected > 0, got {connect_timeout_seconds}"
        ),
    )

    read_timeout_seconds = _read_float(
        "SHIPSTATION_READ_TIMEOUT_SECONDS",
        str(max(timeout_seconds, connect_timeout_seconds)),
    )
    _validate(
        read_timeout_seconds > 0,
        f"Invalid SHIPSTATION_READ_TIMEOUT_SECONDS: expected > 0, got {read_timeout_seconds}",
    )

    max_connections = _read_int("SHIPSTATION_MAX_CONNECTIONS", "10")
    _validate(
        max_connections >= 1,
        f"Invalid SHIPSTATION_MAX_CONNECTIONS: expected >= 1, got {max_connections}",
    )

    verify_ssl = _coerce_bool(os.getenv("SHIPSTATION_VERIFY_SSL"), True)

    values = {"SHIPSTATION_API_KEY": api_key, "SHIPSTATION_API_SECRET": api_secret}
    _require(values, ["SHIPSTATION_API_KEY", "SHIPSTATION_API_SECRET"])

    return ClientConfig(
        api_key=api_key,
        api_secret=api_secret,
        api_base_url=api_base_url.rstrip("/"),
        partner_key=partner_key,
        connect_timeout_seconds=connect_timeout_seconds,
        read_timeout_seconds=read_timeout_seconds,
        max_connections=max_connections,
        verify_ssl=verify_ssl,
    )
