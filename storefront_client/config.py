"""Runtime configuration for the storefront client."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import voluptuous as vol

from .const import (
    CONF_BASE_URL,
    CONF_SERVER_LOGOUT,
    CONF_TIMEOUT,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENV_BASE_URL,
    ENV_SERVER_LOGOUT,
    ENV_TIMEOUT,
    MIN_TIMEOUT,
    TRUTHY_STRINGS,
)

_LOGGER = logging.getLogger(__name__)


def _base_url(value: Any) -> str:
    text = vol.Coerce(str)(value).strip()
    if not text.startswith(("http://", "https://")):
        raise vol.Invalid(f"base URL must start with http:// or https://: {value!r}")
    return text.rstrip("/")


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_BASE_URL, default=DEFAULT_BASE_URL): _base_url,
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=MIN_TIMEOUT)
        ),
        vol.Optional(CONF_SERVER_LOGOUT, default=False): vol.Boolean(),
    },
    extra=vol.REMOVE_EXTRA,
)


@dataclass(slots=True)
class StorefrontConfig:
    """Settings shared by every store in a session."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    server_logout: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> StorefrontConfig:
        """Validate ``options`` and build a config.

        Raises :class:`voluptuous.Invalid` when a value is malformed.
        """

        data = CONFIG_SCHEMA(dict(options))
        return cls(
            base_url=data[CONF_BASE_URL],
            timeout=data[CONF_TIMEOUT],
            server_logout=data[CONF_SERVER_LOGOUT],
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StorefrontConfig:
        """Build a config from ``STOREFRONT_*`` environment variables."""

        environ = os.environ if environ is None else environ
        options: dict[str, Any] = {}
        base_url = (environ.get(ENV_BASE_URL) or "").strip()
        if base_url:
            options[CONF_BASE_URL] = base_url
        timeout_raw = (environ.get(ENV_TIMEOUT) or "").strip()
        if timeout_raw:
            try:
                options[CONF_TIMEOUT] = max(MIN_TIMEOUT, float(timeout_raw))
            except ValueError:
                _LOGGER.warning("Ignoring invalid %s=%r", ENV_TIMEOUT, timeout_raw)
        logout_raw = (environ.get(ENV_SERVER_LOGOUT) or "").strip().lower()
        if logout_raw:
            options[CONF_SERVER_LOGOUT] = logout_raw in TRUTHY_STRINGS
        return cls.from_options(options)

    def to_options(self) -> dict[str, Any]:
        return {
            CONF_BASE_URL: self.base_url,
            CONF_TIMEOUT: self.timeout,
            CONF_SERVER_LOGOUT: self.server_logout,
        }


__all__ = ["CONFIG_SCHEMA", "StorefrontConfig"]
