"""HTTP transport shared by every store."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from aiohttp import ClientError, ClientSession

from .config import StorefrontConfig
from .endpoints import ApiEndpoints

_LOGGER = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


class TransportError(RuntimeError):
    """Raised when a request fails at the network level or returns a non-2xx status."""

    def __init__(self, message: str, *, status: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class UnauthenticatedError(TransportError):
    """Raised when the API rejects the session credentials (401/403)."""


def _is_ok(status: int) -> bool:
    return 200 <= status < 300


class StorefrontApi:
    """Thin wrapper around :class:`aiohttp.ClientSession` with ambient credentials.

    Session cookies live in the session's cookie jar and are attached to every
    request, so the jar is the only credential material the client holds.
    """

    def __init__(self, config: StorefrontConfig | None = None, session: ClientSession | None = None) -> None:
        self.config = config or StorefrontConfig()
        self.endpoints = ApiEndpoints(self.config.base_url)
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> ClientSession:
        if self._session is None:
            # unsafe=True keeps cookies set by IP-address hosts such as 127.0.0.1.
            self._session = ClientSession(cookie_jar=aiohttp.CookieJar(unsafe=True))
            self._owns_session = True
        return self._session

    async def async_close(self) -> None:
        if not self._owns_session or self._session is None:
            return
        if not self._session.closed:
            await self._session.close()
        self._session = None

    async def async_fetch_json(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body."""

        try:
            async with self.session.get(url, headers=_HEADERS, timeout=self._timeout()) as resp:
                self._check_status(resp.status, url, getattr(resp, "reason", None))
                return await resp.json(content_type=None)
        except ValueError as err:
            raise TransportError(f"invalid JSON from {url}: {err}", url=url) from err
        except (ClientError, asyncio.TimeoutError) as err:
            raise TransportError(f"request to {url} failed: {err}", url=url) from err

    async def async_request(self, url: str) -> int:
        """GET ``url`` for its side effect; the body is ignored."""

        try:
            async with self.session.get(url, headers=_HEADERS, timeout=self._timeout()) as resp:
                self._check_status(resp.status, url, getattr(resp, "reason", None))
                return resp.status
        except (ClientError, asyncio.TimeoutError) as err:
            raise TransportError(f"request to {url} failed: {err}", url=url) from err

    def clear_credentials(self) -> None:
        """Expire every cookie the client holds."""

        session = self._session
        if session is None:
            return
        session.cookie_jar.clear()
        _LOGGER.debug("Cleared session cookies")

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.config.timeout)

    @staticmethod
    def _check_status(status: int, url: str, reason: str | None) -> None:
        if _is_ok(status):
            return
        message = f"API call failed: {status} {reason or ''}".rstrip()
        if status in {401, 403}:
            raise UnauthenticatedError(message, status=status, url=url)
        raise TransportError(message, status=status, url=url)


__all__ = ["StorefrontApi", "TransportError", "UnauthenticatedError"]
