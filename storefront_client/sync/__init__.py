"""Local mirrors of the storefront's per-user collections."""

from .base import Listener, ObservableStore, SyncStatus
from .collection import MutableCollection, SynchronizedCollection, normalise_item_id
from .identity import IdentityStore, User
from .registry import StoreRegistry
from .stores import BoughtStore, CartStore, WishlistStore

__all__ = [
    "BoughtStore",
    "CartStore",
    "IdentityStore",
    "Listener",
    "MutableCollection",
    "ObservableStore",
    "StoreRegistry",
    "SyncStatus",
    "SynchronizedCollection",
    "User",
    "WishlistStore",
    "normalise_item_id",
]
