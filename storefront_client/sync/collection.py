"""Membership sets mirrored from the storefront API.

Each collection keeps a local set of item identifiers. A refresh replaces the
whole set with the server's answer; ``add``/``remove`` call the server first
and only touch the local set once the server has accepted the change. No
locking is done between overlapping calls on one collection, so the last
in-memory write wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, ClassVar

from ..api import StorefrontApi, TransportError
from ..const import ITEM_KEY, MSG_ADD_FAILED, MSG_FETCH_FAILED, MSG_REMOVE_FAILED
from .base import ObservableStore

_LOGGER = logging.getLogger(__name__)


def normalise_item_id(item_id: Any) -> str:
    """Return ``item_id`` as a stripped string, rejecting empty identifiers."""

    if item_id is None or isinstance(item_id, bool):
        raise ValueError(f"invalid item id: {item_id!r}")
    text = str(item_id).strip()
    if not text:
        raise ValueError("item id must not be empty")
    return text


class SynchronizedCollection(ObservableStore):
    """Read-only mirror of a server-side collection."""

    collection: ClassVar[str]
    item_key: ClassVar[str] = ITEM_KEY

    def __init__(self, api: StorefrontApi) -> None:
        super().__init__()
        self.api = api
        self._members: set[str] = set()

    @property
    def members(self) -> frozenset[str]:
        return frozenset(self._members)

    def __contains__(self, item_id: object) -> bool:
        try:
            return normalise_item_id(item_id) in self._members
        except ValueError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self._members)

    async def async_update_store(self) -> frozenset[str]:
        """Replace the local set with the server's current collection."""

        self.status.loading = True
        self.status.error = None
        await self._async_notify()
        try:
            payload = await self.api.async_fetch_json(self.api.endpoints.fetch(self.collection))
            item_ids = self._extract_ids(payload)
        except TransportError as err:
            _LOGGER.warning("Failed to update %s store: %s", self.collection, err)
            self.status.error = MSG_FETCH_FAILED[self.collection]
            raise
        else:
            self._members.clear()
            self._members.update(item_ids)
        finally:
            self.status.loading = False
            await self._async_notify()
        return self.members

    def _extract_ids(self, payload: Any) -> list[str]:
        if not isinstance(payload, list):
            raise TransportError(
                f"expected a list of {self.collection} records, got {type(payload).__name__}",
                url=self.api.endpoints.fetch(self.collection),
            )
        item_ids: list[str] = []
        for record in payload:
            raw = record.get(self.item_key) if isinstance(record, Mapping) else None
            try:
                item_ids.append(normalise_item_id(raw))
            except ValueError:
                _LOGGER.warning("Skipping %s record without %s: %r", self.collection, self.item_key, record)
        return item_ids

    def as_dict(self) -> dict[str, Any]:
        return {"collection": self.collection, "members": sorted(self._members), **self.status.as_dict()}


class MutableCollection(SynchronizedCollection):
    """Collection that also supports per-item add/remove/toggle."""

    async def async_add(self, item_id: Any) -> None:
        key = normalise_item_id(item_id)
        self.status.error = None
        try:
            await self.api.async_request(self.api.endpoints.add(self.collection, key))
        except TransportError as err:
            _LOGGER.warning("Failed to add %s to %s: %s", key, self.collection, err)
            self.status.error = MSG_ADD_FAILED[self.collection]
            await self._async_notify()
            raise
        self._members.add(key)
        await self._async_notify()

    async def async_remove(self, item_id: Any) -> None:
        key = normalise_item_id(item_id)
        self.status.error = None
        try:
            await self.api.async_request(self.api.endpoints.remove(self.collection, key))
        except TransportError as err:
            _LOGGER.warning("Failed to remove %s from %s: %s", key, self.collection, err)
            self.status.error = MSG_REMOVE_FAILED[self.collection]
            await self._async_notify()
            raise
        self._members.discard(key)
        await self._async_notify()

    async def async_toggle(self, item_id: Any) -> bool:
        """Flip membership of ``item_id``; return ``True`` when it was added.

        The direction is read from the local set, which may be stale while
        another call on this collection is in flight.
        """

        key = normalise_item_id(item_id)
        if key in self._members:
            await self.async_remove(key)
            return False
        await self.async_add(key)
        return True


__all__ = ["MutableCollection", "SynchronizedCollection", "normalise_item_id"]
