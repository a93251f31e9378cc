from __future__ import annotations

import asyncio

import pytest
from aiohttp import ClientConnectionError, ClientSession
from conftest import DummyResp, url

from storefront_client.api import StorefrontApi, TransportError, UnauthenticatedError


@pytest.mark.asyncio
async def test_fetch_json_returns_payload(api, session):
    session.add(url("/api/fetch/cart"), DummyResp(200, [{"book_id": "a"}]))
    assert await api.async_fetch_json(url("/api/fetch/cart")) == [{"book_id": "a"}]
    assert session.calls == [url("/api/fetch/cart")]


@pytest.mark.asyncio
async def test_fetch_json_non_ok_status(api, session):
    session.add(url("/api/fetch/cart"), DummyResp(500, reason="Internal Server Error"))
    with pytest.raises(TransportError) as exc:
        await api.async_fetch_json(url("/api/fetch/cart"))
    assert exc.value.status == 500
    assert "Internal Server Error" in str(exc.value)
    assert not isinstance(exc.value, UnauthenticatedError)


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 403])
async def test_fetch_json_unauthenticated(api, session, status):
    session.add(url("/api/me"), DummyResp(status))
    with pytest.raises(UnauthenticatedError) as exc:
        await api.async_fetch_json(url("/api/me"))
    assert exc.value.status == status


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [ClientConnectionError("refused"), asyncio.TimeoutError()])
async def test_network_errors_are_wrapped(api, session, error):
    session.add(url("/api/add/cart/1"), DummyResp(exc=error))
    with pytest.raises(TransportError) as exc:
        await api.async_request(url("/api/add/cart/1"))
    assert exc.value.status is None
    assert exc.value.__cause__ is error


@pytest.mark.asyncio
async def test_invalid_json(api, session):
    session.add(url("/api/me"), DummyResp(200, json_exc=ValueError("Expecting value")))
    with pytest.raises(TransportError, match="invalid JSON"):
        await api.async_fetch_json(url("/api/me"))


@pytest.mark.asyncio
async def test_request_accepts_any_2xx(api, session):
    session.add(url("/api/remove/cart/1"), DummyResp(204))
    assert await api.async_request(url("/api/remove/cart/1")) == 204


@pytest.mark.asyncio
async def test_redirect_status_is_failure(api, session):
    session.add(url("/api/remove/cart/1"), DummyResp(302))
    with pytest.raises(TransportError):
        await api.async_request(url("/api/remove/cart/1"))


def test_clear_credentials(api, session):
    api.clear_credentials()
    assert session.cookie_jar.cookies == {}
    assert session.cookie_jar.cleared == 1


@pytest.mark.asyncio
async def test_close_leaves_injected_session_open(api, session):
    await api.async_close()
    assert session.closed is False


@pytest.mark.asyncio
async def test_owned_session_lifecycle():
    api = StorefrontApi()
    api.clear_credentials()
    owned = api.session
    assert isinstance(owned, ClientSession)
    assert api.session is owned
    await api.async_close()
    assert owned.closed
