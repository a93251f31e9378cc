from __future__ import annotations

from typing import Final

DOMAIN = "storefront_client"

CONF_BASE_URL = "base_url"
CONF_TIMEOUT = "timeout"
CONF_SERVER_LOGOUT = "server_logout"

ENV_BASE_URL = "STOREFRONT_API_BASE_URL"
ENV_TIMEOUT = "STOREFRONT_API_TIMEOUT"
ENV_SERVER_LOGOUT = "STOREFRONT_SERVER_LOGOUT"

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 15.0
MIN_TIMEOUT = 1.0

# Field carrying the item identifier in every collection record
ITEM_KEY: Final = "book_id"

COLLECTION_WISHLIST = "wishlist"
COLLECTION_CART = "cart"
COLLECTION_BOUGHT = "bought"

MUTABLE_COLLECTIONS: tuple[str, ...] = (COLLECTION_WISHLIST, COLLECTION_CART)
COLLECTIONS: tuple[str, ...] = (*MUTABLE_COLLECTIONS, COLLECTION_BOUGHT)

# User-facing messages recorded into a store's ``error`` field.
MSG_FETCH_FAILED: dict[str, str] = {
    COLLECTION_WISHLIST: "Failed to fetch wishlist. Please try again.",
    COLLECTION_CART: "Failed to fetch cart. Please try again.",
    COLLECTION_BOUGHT: "Failed to fetch bought. Please try again.",
}
MSG_ADD_FAILED: dict[str, str] = {
    COLLECTION_WISHLIST: "Failed to add to wishlist. Please try again.",
    COLLECTION_CART: "Failed to add to cart. Please try again.",
}
MSG_REMOVE_FAILED: dict[str, str] = {
    COLLECTION_WISHLIST: "Failed to remove from wishlist. Please try again.",
    COLLECTION_CART: "Failed to remove from cart. Please try again.",
}

TRUTHY_STRINGS = frozenset({"1", "true", "yes", "on"})
