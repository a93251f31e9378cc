from __future__ import annotations

import asyncio
from typing import Any

import pytest

from storefront_client.api import StorefrontApi
from storefront_client.config import StorefrontConfig
from storefront_client.sync import StoreRegistry

BASE_URL = "http://api.test"


class DummyResp:
    """Async context manager standing in for an aiohttp response."""

    def __init__(
        self,
        status: int = 200,
        data: Any = None,
        *,
        reason: str | None = None,
        exc: BaseException | None = None,
        json_exc: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.status = status
        self.reason = reason or ("OK" if status < 400 else "Error")
        self._data = data
        self._exc = exc
        self._json_exc = json_exc
        self._gate = gate

    async def __aenter__(self):
        if self._gate is not None:
            await self._gate.wait()
        if self._exc is not None:
            raise self._exc
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def json(self, content_type=None):
        if self._json_exc is not None:
            raise self._json_exc
        return self._data


class CookieJar:
    def __init__(self) -> None:
        self.cookies = {"session": "abc", "csrftoken": "def"}
        self.cleared = 0

    def clear(self) -> None:
        self.cookies.clear()
        self.cleared += 1


class Session:
    """Fake :class:`aiohttp.ClientSession` serving queued responses per URL."""

    def __init__(self) -> None:
        self.routes: dict[str, list[DummyResp]] = {}
        self.calls: list[str] = []
        self.closed = False
        self.cookie_jar = CookieJar()

    def add(self, url: str, *responses: DummyResp) -> None:
        self.routes.setdefault(url, []).extend(responses)

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        queue = self.routes.get(url)
        if not queue:
            return DummyResp(404, reason="Not Found")
        # The last queued response is sticky.
        return queue.pop(0) if len(queue) > 1 else queue[0]

    async def close(self) -> None:
        self.closed = True


def url(path: str) -> str:
    return f"{BASE_URL}{path}"


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def config() -> StorefrontConfig:
    return StorefrontConfig(base_url=BASE_URL, timeout=5.0)


@pytest.fixture
def api(config: StorefrontConfig, session: Session) -> StorefrontApi:
    return StorefrontApi(config, session)


@pytest.fixture
def navigations() -> list[str]:
    return []


@pytest.fixture
def registry(config: StorefrontConfig, session: Session, navigations: list[str]) -> StoreRegistry:
    return StoreRegistry(config, session=session, navigator=navigations.append)
