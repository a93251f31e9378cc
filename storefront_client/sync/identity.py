"""Authenticated-user state."""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..api import StorefrontApi, TransportError, UnauthenticatedError
from .base import ObservableStore

_LOGGER = logging.getLogger(__name__)

Navigator = Callable[[str], Any]


@dataclass(slots=True, frozen=True)
class User:
    """Identity returned by the ``/api/me`` endpoint."""

    id: int | str
    name: str
    email: str
    avatar: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> User:
        if not isinstance(payload, Mapping):
            raise ValueError(f"user payload must be an object, got {type(payload).__name__}")
        user_id = payload.get("id")
        if user_id is None or isinstance(user_id, bool) or str(user_id).strip() == "":
            raise ValueError("user payload missing id")
        name = str(payload.get("name") or "").strip()
        email = str(payload.get("email") or "").strip()
        if not email:
            raise ValueError("user payload missing email")
        avatar_raw = payload.get("avatar")
        avatar = str(avatar_raw).strip() if avatar_raw else None
        return cls(id=user_id, name=name, email=email, avatar=avatar or None)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"id": self.id, "name": self.name, "email": self.email}
        if self.avatar:
            payload["avatar"] = self.avatar
        return payload


class IdentityStore(ObservableStore):
    """Tracks who is signed in.

    Unlike the collections, a failed check is routine: it leaves ``user`` unset
    and never raises, so "not signed in" and "server unreachable" look the same
    to callers.
    """

    def __init__(
        self,
        api: StorefrontApi,
        *,
        server_logout: bool = False,
        navigator: Navigator | None = None,
    ) -> None:
        # The first check runs eagerly at session start.
        super().__init__(loading=True)
        self.api = api
        self.user: User | None = None
        self._server_logout = server_logout
        self._navigator = navigator or webbrowser.open

    @property
    def authenticated(self) -> bool:
        return self.user is not None

    async def async_check_auth(self) -> User | None:
        self.status.loading = True
        try:
            payload = await self.api.async_fetch_json(self.api.endpoints.me)
            user = User.from_payload(payload)
        except UnauthenticatedError:
            _LOGGER.debug("No authenticated user")
            self.user = None
        except (TransportError, ValueError) as err:
            _LOGGER.debug("Auth check failed: %s", err)
            self.user = None
        else:
            self.user = user
        finally:
            self.status.loading = False
            await self._async_notify()
        return self.user

    def sign_in_with_google(self) -> None:
        """Send the browser to the provider login page."""

        self._navigator(self.api.endpoints.login_google)

    async def async_sign_out(self) -> None:
        """Forget the user and expire all session cookies."""

        if self._server_logout:
            try:
                await self.api.async_request(self.api.endpoints.logout)
            except TransportError as err:
                _LOGGER.warning("Server logout failed, signing out locally: %s", err)
        self.user = None
        self.api.clear_credentials()
        await self._async_notify()

    def as_dict(self) -> dict[str, Any]:
        return {"user": self.user.to_dict() if self.user else None, **self.status.as_dict()}


__all__ = ["IdentityStore", "Navigator", "User"]
