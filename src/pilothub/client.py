"""
HTTP client for the pilothub API.

Mirrors what the dashboard front end does: GET responses are cached per
path, and every successful write drops the cached reads under the
resource it touched so the next read refetches.

Usage::

    from pilothub.client import PilotHubClient

    with PilotHubClient("http://localhost:5000/api") as client:
        home = client.get_page("home")
        client.update_page("home", title="Welcome")
        hero = client.page_payload("home")["hero"]

Tests pass a FastAPI ``TestClient`` (an ``httpx.Client`` subclass) as
``http`` with ``base_url="http://testserver/api"``.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import httpx

from pilothub.core.errors import ClientError
from pilothub.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"


class PilotHubClient:
    """Thin, caching wrapper over the REST endpoints.

    Non-2xx responses raise :class:`~pilothub.core.errors.ClientError`
    carrying the HTTP status and the server's ``error`` message.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, *, http: httpx.Client | None = None, timeout: float = 10.0):
        self._base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(timeout=timeout)
        self._cache: dict[str, Any] = {}

    # ── lifecycle ─────────────────────────────────────────────────────

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> PilotHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ── transport ─────────────────────────────────────────────────────

    def _request(self, method: str, path: str, payload: Any = None) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            response = self._http.request(method, url, json=payload)
        except httpx.HTTPError as exc:
            raise ClientError(f"{method} {path} failed: {exc}", cause=exc) from exc

        if response.is_success:
            return response

        try:
            message = response.json().get("error") or response.reason_phrase
        except (ValueError, AttributeError):
            message = response.text or response.reason_phrase
        logger.warning("client.request_failed", method=method, path=path, status=response.status_code)
        raise ClientError(message, status_code=response.status_code)

    def get_json(self, path: str) -> Any:
        """GET *path*, served from cache after the first successful read."""
        if path in self._cache:
            return self._cache[path]
        data = self._request("GET", path).json()
        self._cache[path] = data
        return data

    def invalidate(self, prefix: str = "") -> None:
        """Drop cached reads whose path starts with *prefix* (all when empty)."""
        for key in [k for k in self._cache if k.startswith(prefix)]:
            del self._cache[key]

    def _write(self, method: str, path: str, invalidates: str, payload: Any = None) -> Any:
        response = self._request(method, path, payload)
        self.invalidate(invalidates)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # ── pages ─────────────────────────────────────────────────────────

    def list_pages(self) -> list[dict[str, Any]]:
        return self.get_json("/pages")

    def get_page(self, name: str) -> dict[str, Any]:
        return self.get_json(f"/pages/{quote(name, safe='')}")

    def update_page(self, name: str, **fields: Any) -> dict[str, Any]:
        """PATCH a page.  Keyword names use the wire spelling (``title``, ``content``)."""
        body = {key: value for key, value in fields.items() if value is not None}
        return self._write("PATCH", f"/pages/{quote(name, safe='')}", "/pages", body)

    def page_payload(self, name: str) -> Any:
        """Decode the JSON document stored in a page's ``content``."""
        content = self.get_page(name).get("content", "")
        try:
            return json.loads(content)
        except (TypeError, ValueError) as exc:
            raise ClientError(f"Page {name!r} content is not valid JSON", cause=exc) from exc

    # ── id-keyed collections ──────────────────────────────────────────

    def list_records(self, collection: str) -> list[dict[str, Any]]:
        return self.get_json(f"/{collection}")

    def get_record(self, collection: str, record_id: int) -> dict[str, Any]:
        return self.get_json(f"/{collection}/{record_id}")

    def create_record(self, collection: str, payload: dict[str, Any]) -> dict[str, Any]:
        return self._write("POST", f"/{collection}", f"/{collection}", payload)

    def update_record(self, collection: str, record_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        return self._write("PATCH", f"/{collection}/{record_id}", f"/{collection}", payload)

    def delete_record(self, collection: str, record_id: int) -> None:
        self._write("DELETE", f"/{collection}/{record_id}", f"/{collection}")

    # ── auth ──────────────────────────────────────────────────────────

    def login(self, username: str, password: str) -> dict[str, Any]:
        return self._request("POST", "/login", {"username": username, "password": password}).json()
