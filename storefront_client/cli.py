"""Command line entrypoint for inspecting and changing storefront collections."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence

from .api import TransportError
from .config import StorefrontConfig
from .const import COLLECTIONS, MUTABLE_COLLECTIONS
from .sync import StoreRegistry

_LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Storefront wishlist/cart/purchase sync client")
    parser.add_argument("--base-url", help="API base URL (defaults to $STOREFRONT_API_BASE_URL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("whoami", help="Show the signed-in user")

    list_parser = sub.add_parser("list", help="Print the members of a collection")
    list_parser.add_argument("collection", choices=COLLECTIONS)

    toggle_parser = sub.add_parser("toggle", help="Add or remove an item")
    toggle_parser.add_argument("collection", choices=MUTABLE_COLLECTIONS)
    toggle_parser.add_argument("item_id")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> StorefrontConfig:
    options = StorefrontConfig.from_env().to_options()
    if args.base_url:
        options["base_url"] = args.base_url
    if args.timeout is not None:
        options["timeout"] = args.timeout
    return StorefrontConfig.from_options(options)


async def main_async(args: argparse.Namespace, registry: StoreRegistry | None = None) -> int:
    registry = registry or StoreRegistry(build_config(args))
    async with registry:
        if args.command == "whoami":
            user = registry.identity.user
            print(json.dumps(user.to_dict() if user else None))
            return 0 if user else 1

        try:
            if args.command == "list":
                store = registry.collection(args.collection)
                members = await store.async_update_store()
                print(json.dumps(sorted(members)))
                return 0

            store = registry.mutable_collection(args.collection)
            # Toggle decides its direction from the local set, so load it first.
            await store.async_update_store()
            added = await store.async_toggle(args.item_id)
        except TransportError as err:
            _LOGGER.debug("Command failed", exc_info=True)
            print(f"error: {err}", file=sys.stderr)
            return 2
        print(f"{'added to' if added else 'removed from'} {args.collection}: {args.item_id}")
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    try:
        return asyncio.run(main_async(args))
    except KeyboardInterrupt:  # pragma: no cover - manual interruption
        _LOGGER.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
