from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError
from ..models_stores import (
    Marketplace,
    RefreshStoreRequest,
    Store,
    StoreIdRequest,
    StoreRefreshStatusResponse,
    SuccessResponse,
)
from .base import BaseClient


@dataclass
class StoresClient(BaseClient):
    resource: str = "stores"

    def get_store(self, store_id: int) -> Store:
        data = self._request("GET", _require_id(store_id), operation="get_store")
        return self._decode(Store, data, "store")

    def update_store(self, store_id: int, store: Store | Mapping[str, Any]) -> Store:
        """Replace a store. Partial updates are not supported: every field is sent."""
        payload = _coerce_store(store)
        data = self._request(
            "PUT",
            _require_id(store_id),
            json_body=payload.to_payload(),
            operation="update_store",
        )
        return self._decode(Store, data, "store")

    def list_stores(self, show_inactive: bool = False, marketplace_id: int | None = None) -> list[Store]:
        params = build_store_list_params(show_inactive, marketplace_id)
        data = self._request("GET", params=params or None, operation="list_stores")
        return self._decode_list(Store, data, "store list")

    def get_refresh_status(self, store_id: int) -> StoreRefreshStatusResponse:
        data = self._request(
            "GET",
            "getrefreshstatus",
            params={"storeId": _require_id(store_id)},
            operation="get_refresh_status",
        )
        return self._decode(StoreRefreshStatusResponse, data, "refresh status")

    def refresh_all_stores(self) -> bool:
        return self._post_action("refreshstore", RefreshStoreRequest().to_payload(), "refresh_all_stores")

    def refresh_store(self, store_id: int, refresh_date: datetime | date | None = None) -> bool:
        """Start an order import for one store, from ``refresh_date`` when given."""
        body = RefreshStoreRequest(store_id=_require_id(store_id), refresh_date=refresh_date)
        return self._post_action("refreshstore", body.to_payload(), "refresh_store")

    def list_marketplaces(self) -> list[Marketplace]:
        data = self._request("GET", "marketplaces", operation="list_marketplaces")
        return self._decode_list(Marketplace, data, "marketplace list")

    def deactivate_store(self, store_id: int) -> bool:
        body = StoreIdRequest(store_id=_require_id(store_id))
        return self._post_action("deactivate", body.to_payload(), "deactivate_store")

    def reactivate_store(self, store_id: int) -> bool:
        # Stores are active by default; this only reverses a deactivation.
        body = StoreIdRequest(store_id=_require_id(store_id))
        return self._post_action("reactivate", body.to_payload(), "reactivate_store")

    def _post_action(self, action: str, body: dict[str, Any], operation: str) -> bool:
        data = self._request("POST", action, json_body=body, operation=operation)
        return self._decode(SuccessResponse, data, action).success


def build_store_list_params(show_inactive: bool = False, marketplace_id: int | None = None) -> dict[str, str]:
    params: dict[str, str] = {}
    if show_inactive:
        params["showInactive"] = "true"
    if marketplace_id is not None:
        params["marketplaceId"] = str(_require_marketplace_id(marketplace_id))
    return params


def _require_id(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"store_id must be a positive integer, got {value!r}")
    return value


def _require_marketplace_id(value: int) -> int:
    # 0 is ShipStation's own manual-store marketplace.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"marketplace_id must be a non-negative integer, got {value!r}")
    return value


def _coerce_store(value: Store | Mapping[str, Any]) -> Store:
    if isinstance(value, Store):
        return value
    try:
        return Store.model_validate(value)
    except PydanticValidationError as exc:
        raise ValidationError(
            code="INVALID_STORE",
            message="Store payload failed client-side validation",
            details=exc.errors(include_url=False),
            status_code=0,
            raw_payload=value,
        ) from exc
