"""Session-wide holder for the storefront stores."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import Any

from aiohttp import ClientSession

from ..api import StorefrontApi, TransportError
from ..config import StorefrontConfig
from ..const import COLLECTIONS, MUTABLE_COLLECTIONS
from .collection import MutableCollection, SynchronizedCollection
from .identity import IdentityStore, Navigator
from .stores import BoughtStore, CartStore, WishlistStore

_LOGGER = logging.getLogger(__name__)


class StoreRegistry:
    """Create the stores for one client session and hand them to consumers.

    Build one registry per session and pass it (or individual stores) to the
    code that needs them. ``async_setup`` runs the eager identity check.
    """

    def __init__(
        self,
        config: StorefrontConfig | None = None,
        *,
        session: ClientSession | None = None,
        navigator: Navigator | None = None,
    ) -> None:
        self.config = config or StorefrontConfig()
        self.api = StorefrontApi(self.config, session)
        self.identity = IdentityStore(
            self.api,
            server_logout=self.config.server_logout,
            navigator=navigator,
        )
        self.wishlist = WishlistStore(self.api)
        self.cart = CartStore(self.api)
        self.bought = BoughtStore(self.api)
        self._collections: dict[str, SynchronizedCollection] = {
            store.collection: store for store in (self.wishlist, self.cart, self.bought)
        }

    def collection(self, name: str) -> SynchronizedCollection:
        try:
            return self._collections[name]
        except KeyError:
            raise ValueError(f"unknown collection {name!r}; expected one of {', '.join(COLLECTIONS)}") from None

    def mutable_collection(self, name: str) -> MutableCollection:
        store = self.collection(name)
        if not isinstance(store, MutableCollection):
            raise ValueError(f"collection {name!r} is read-only; expected one of {', '.join(MUTABLE_COLLECTIONS)}")
        return store

    async def async_setup(self) -> None:
        await self.identity.async_check_auth()
        _LOGGER.debug("Storefront session ready (authenticated=%s)", self.identity.authenticated)

    async def async_refresh_all(self) -> dict[str, str | None]:
        """Refresh every collection concurrently.

        Returns the ``error`` message of each collection (``None`` on success).
        Transport failures are already recorded on the stores and are not
        raised; anything else is.
        """

        stores = list(self._collections.values())
        results = await asyncio.gather(
            *(store.async_update_store() for store in stores),
            return_exceptions=True,
        )
        errors: dict[str, str | None] = {}
        for store, result in zip(stores, results):
            if isinstance(result, BaseException) and not isinstance(result, TransportError):
                raise result
            errors[store.collection] = store.error
        return errors

    def snapshot(self) -> dict[str, Any]:
        return {
            "identity": self.identity.as_dict(),
            **{name: store.as_dict() for name, store in self._collections.items()},
        }

    async def async_close(self) -> None:
        await self.api.async_close()

    async def __aenter__(self) -> StoreRegistry:
        await self.async_setup()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.async_close()


__all__ = ["StoreRegistry"]
