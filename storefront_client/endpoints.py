"""URL builders for the storefront REST API."""

from __future__ import annotations

from urllib.parse import quote

from yarl import URL

from .const import DEFAULT_BASE_URL


def _segment(value: str | int) -> str:
    # Encode slashes too so a search term never splits the path.
    return quote(str(value), safe="")


class ApiEndpoints:
    """Build absolute endpoint URLs relative to a base URL."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self._base = URL(base_url.rstrip("/") or DEFAULT_BASE_URL)

    @property
    def base_url(self) -> str:
        return str(self._base)

    def _join(self, *segments: str | int) -> str:
        return str(self._base.joinpath(*(_segment(seg) for seg in segments), encoded=True))

    # Collections ------------------------------------------------------
    def fetch(self, collection: str) -> str:
        return self._join("api", "fetch", collection)

    def add(self, collection: str, item_id: str | int) -> str:
        return self._join("api", "add", collection, item_id)

    def remove(self, collection: str, item_id: str | int) -> str:
        return self._join("api", "remove", collection, item_id)

    # Identity ---------------------------------------------------------
    @property
    def me(self) -> str:
        return self._join("api", "me")

    @property
    def login_google(self) -> str:
        return self._join("api", "login", "google")

    @property
    def logout(self) -> str:
        return self._join("api", "logout")

    # Catalogue --------------------------------------------------------
    def search(self, query: str | None = None, max_price: float | None = None) -> str:
        """Return the search URL; an empty query is sent as ``0``."""

        segments: list[str | int] = ["api", "search", query or "0", "upper_price"]
        if max_price:
            segments.append(_format_price(max_price))
        return self._join(*segments)

    @property
    def suggest(self) -> str:
        return self._join("api", "suggest")

    def book(self, book_id: str | int) -> str:
        return self._join("api", "fetch", "book", book_id)

    @property
    def checkout(self) -> str:
        return self._join("api", "checkout")

    def chat(self, query: str, book_id: str | int | None = None) -> str:
        segments: list[str | int] = ["api", "chat", "query", query, "book_id"]
        if book_id:
            segments.append(book_id)
        return self._join(*segments)


def _format_price(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


__all__ = ["ApiEndpoints"]
