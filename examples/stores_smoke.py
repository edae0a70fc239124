from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime

from shipstation_client_sdk import ApiSession, load_config
from shipstation_client_sdk.clients.stores_client import StoresClient
from shipstation_client_sdk.exceptions import ApiError
from shipstation_client_sdk.logging_utils import configure_logging


def _print(payload: object) -> None:
    print(json.dumps(payload, indent=2, default=str))


def cmd_list(client: StoresClient, args: argparse.Namespace) -> None:
    stores = client.list_stores(show_inactive=args.show_inactive, marketplace_id=args.marketplace_id)
    print(f"Stores ({len(stores)}):")
    for store in stores[: args.limit]:
        payload = store.model_dump(exclude_none=True, mode="json")
        _print({key: payload.get(key) for key in ("store_id", "store_name", "marketplace_name", "active")})


def cmd_get(client: StoresClient, args: argparse.Namespace) -> None:
    _print(client.get_store(args.store_id).model_dump(exclude_none=True, mode="json"))


def cmd_marketplaces(client: StoresClient, args: argparse.Namespace) -> None:
    for marketplace in client.list_marketplaces()[: args.limit]:
        _print(marketplace.model_dump(exclude_none=True, mode="json"))


def cmd_refresh_status(client: StoresClient, args: argparse.Namespace) -> None:
    _print(client.get_refresh_status(args.store_id).model_dump(exclude_none=True, mode="json"))


def cmd_refresh(client: StoresClient, args: argparse.Namespace) -> None:
    if args.store_id is None:
        ok = client.refresh_all_stores()
    else:
        refresh_date = datetime.fromisoformat(args.refresh_date) if args.refresh_date else None
        ok = client.refresh_store(args.store_id, refresh_date)
    _print({"success": ok})


def cmd_deactivate(client: StoresClient, args: argparse.Namespace) -> None:
    _print({"success": client.deactivate_store(args.store_id)})


def cmd_reactivate(client: StoresClient, args: argparse.Namespace) -> None:
    _print({"success": client.reactivate_store(args.store_id)})


def main() -> None:
    parser = argparse.ArgumentParser(description="ShipStation stores smoke CLI")
    parser.add_argument("--env-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list")
    list_parser.add_argument("--show-inactive", action="store_true")
    list_parser.add_argument("--marketplace-id", type=int)
    list_parser.add_argument("--limit", type=int, default=10)
    list_parser.set_defaults(func=cmd_list)

    get_parser = subparsers.add_parser("get")
    get_parser.add_argument("store_id", type=int)
    get_parser.set_defaults(func=cmd_get)

    marketplaces_parser = subparsers.add_parser("marketplaces")
    marketplaces_parser.add_argument("--limit", type=int, default=10)
    marketplaces_parser.set_defaults(func=cmd_marketplaces)

    status_parser = subparsers.add_parser("refresh-status")
    status_parser.add_argument("store_id", type=int)
    status_parser.set_defaults(func=cmd_refresh_status)

    refresh_parser = subparsers.add_parser("refresh")
    refresh_parser.add_argument("--store-id", type=int)
    refresh_parser.add_argument("--refresh-date", help="ISO-8601 start date for the order import")
    refresh_parser.set_defaults(func=cmd_refresh)

    deactivate_parser = subparsers.add_parser("deactivate")
    deactivate_parser.add_argument("store_id", type=int)
    deactivate_parser.set_defaults(func=cmd_deactivate)

    reactivate_parser = subparsers.add_parser("reactivate")
    reactivate_parser.add_argument("store_id", type=int)
    reactivate_parser.set_defaults(func=cmd_reactivate)

    args = parser.parse_args()
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config(args.env_file)
    print(f"Base URL: {config.api_base_url}")
    try:
        with ApiSession(config) as session:
            args.func(session.stores_client(), args)
    except ApiError as exc:
        _print({"error": exc.code, "message": exc.message, "status_code": exc.status_code})
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
