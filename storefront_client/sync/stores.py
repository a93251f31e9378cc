from __future__ import annotations

from ..const import COLLECTION_BOUGHT, COLLECTION_CART, COLLECTION_WISHLIST
from .collection import MutableCollection, SynchronizedCollection


class WishlistStore(MutableCollection):
    """Books the signed-in user has wishlisted."""

    collection = COLLECTION_WISHLIST


class CartStore(MutableCollection):
    """Books currently in the user's cart."""

    collection = COLLECTION_CART


class BoughtStore(SynchronizedCollection):
    """Books the user has purchased. Only the server can change this set."""

    collection = COLLECTION_BOUGHT


__all__ = ["BoughtStore", "CartStore", "WishlistStore"]
