"""State and change notification shared by every store."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from contextlib import suppress
from dataclasses import dataclass
from typing import Any

_LOGGER = logging.getLogger(__name__)

Listener = Callable[[Any], Awaitable[None] | None]


@dataclass(slots=True)
class SyncStatus:
    """Loading flag and last user-facing error of a store."""

    loading: bool = False
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"loading": self.loading, "error": self.error}


class ObservableStore:
    """Base class holding a :class:`SyncStatus` and a list of change listeners.

    Listeners are called with the store after every state transition. They may
    be plain callables or coroutine functions; coroutines are awaited in
    registration order.
    """

    def __init__(self, *, loading: bool = False) -> None:
        self.status = SyncStatus(loading=loading)
        self._listeners: list[Listener] = []

    @property
    def loading(self) -> bool:
        return self.status.loading

    @property
    def error(self) -> str | None:
        return self.status.error

    def async_add_listener(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        if listener not in self._listeners:
            self._listeners.append(listener)

        def _remove() -> None:
            with suppress(ValueError):
                self._listeners.remove(listener)

        return _remove

    async def _async_notify(self) -> None:
        for listener in list(self._listeners):
            try:
                result = listener(self)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as err:  # noqa: BLE001 - listeners must not break sync
                _LOGGER.debug("Store listener raised error: %s", err, exc_info=True)


__all__ = ["Listener", "ObservableStore", "SyncStatus"]
