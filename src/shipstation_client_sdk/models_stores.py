from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# ShipStation emits .NET timestamps with up to 7 fractional digits, and the
# refresh status endpoint uses US-style "8/18/2016 7:59:37 AM" stamps.
_EXCESS_FRACTION_RE = re.compile(r"(\.\d{6})\d+")
_US_TIMESTAMP_FORMAT = "%m/%d/%Y %I:%M:%S %p"


def _normalize_timestamp(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if "/" in value:
        try:
            return datetime.strptime(value.strip(), _US_TIMESTAMP_FORMAT)
        except ValueError:
            return value
    return _EXCESS_FRACTION_RE.sub(r"\1", value)


class ShipStationModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class StoreStatusMapping(ShipStationModel):
    order_status: str | None = None
    status_key: str | None = None


class Store(ShipStationModel):
    store_id: int | None = None
    store_name: str | None = None
    marketplace_id: int | None = None
    marketplace_name: str | None = None
    account_name: str | None = None
    email: str | None = None
    integration_url: str | None = None
    active: bool | None = None
    company_name: str | None = None
    phone: str | None = None
    public_email: str | None = None
    website: str | None = None
    refresh_date: datetime | None = None
    last_refresh_attempt: datetime | None = None
    create_date: datetime | None = None
    modify_date: datetime | None = None
    auto_refresh: bool | None = None
    status_mappings: list[StoreStatusMapping] | None = None

    @field_validator("refresh_date", "last_refresh_attempt", "create_date", "modify_date", mode="before")
    @classmethod
    def normalize_timestamps(cls, value: Any) -> Any:
        return _normalize_timestamp(value)


class Marketplace(ShipStationModel):
    marketplace_id: int
    name: str
    can_refresh: bool | None = None
    supports_custom_mappings: bool | None = None
    supports_custom_statuses: bool | None = None
    can_confirm_shipments: bool | None = None


class StoreRefreshStatusResponse(ShipStationModel):
    store_id: int | None = None
    refresh_status_id: int | None = None
    refresh_status: str | None = None
    last_refresh_attempt: datetime | None = None
    refresh_date: datetime | None = None

    @field_validator("last_refresh_attempt", "refresh_date", mode="before")
    @classmethod
    def normalize_timestamps(cls, value: Any) -> Any:
        return _normalize_timestamp(value)


class SuccessResponse(ShipStationModel):
    success: bool
    message: str | None = None


class RefreshStoreRequest(ShipStationModel):
    """Body for ``stores/refreshstore``.

    With no store the service refreshes every refreshable store on the account.
    Without a refresh date it resumes from the store's last recorded refresh date.
    """

    store_id: int | None = None
    refresh_date: datetime | date | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class StoreIdRequest(ShipStationModel):
    store_id: int = Field(gt=0)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
