"""Client-side state for the storefront: wishlist, cart, purchases and identity."""

from __future__ import annotations

from .api import StorefrontApi, TransportError, UnauthenticatedError
from .config import StorefrontConfig
from .endpoints import ApiEndpoints
from .sync import (
    BoughtStore,
    CartStore,
    IdentityStore,
    MutableCollection,
    StoreRegistry,
    SynchronizedCollection,
    User,
    WishlistStore,
)

__all__ = [
    "ApiEndpoints",
    "BoughtStore",
    "CartStore",
    "IdentityStore",
    "MutableCollection",
    "StoreRegistry",
    "StorefrontApi",
    "StorefrontConfig",
    "SynchronizedCollection",
    "TransportError",
    "UnauthenticatedError",
    "User",
    "WishlistStore",
]
