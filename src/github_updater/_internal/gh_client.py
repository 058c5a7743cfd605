"""Thin httpx wrapper over the GitHub REST v3 endpoints used by the updater."""

from __future__ import annotations

import base64
from typing import Any
from urllib.parse import quote

import httpx

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "github-updater"
API_VERSION = "2022-11-28"


class GitHubAPI:
    """Minimal GitHub REST client.

    Every method raises httpx.HTTPStatusError on a non-2xx response and
    httpx.TransportError when the request never completes. Translating these
    into package exceptions is left to the caller.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": DEFAULT_USER_AGENT,
            "X-GitHub-Api-Version": API_VERSION,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        response = self._client.request(method, url, **kwargs)
        response.raise_for_status()
        if not response.content:
            return {}
        return response.json()

    def get_repository(self, full_name: str) -> dict[str, Any]:
        """Fetch a repository by "owner/name"."""
        return self._request("GET", f"/repos/{full_name}")  # type: ignore[no-any-return]

    def create_repository(self, name: str) -> dict[str, Any]:
        """Create a repository owned by the authenticated user."""
        return self._request(  # type: ignore[no-any-return]
            "POST", "/user/repos", json={"name": name}
        )

    def get_contents(self, full_name: str, path: str) -> dict[str, Any] | list[Any]:
        """Fetch the contents entry at path.

        A file yields a dict; a directory yields a list of entries.
        """
        return self._request("GET", f"/repos/{full_name}/contents/{quote(path)}")  # type: ignore[no-any-return]

    def create_contents(
        self, full_name: str, path: str, content: str, message: str
    ) -> dict[str, Any]:
        """Create a new file at path with the given text content."""
        payload = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        return self._request(  # type: ignore[no-any-return]
            "PUT", f"/repos/{full_name}/contents/{quote(path)}", json=payload
        )

    def close(self) -> None:
        self._client.close()
