"""REST transport wrapping the HTTP client."""

from __future__ import annotations

from typing import Any

from .http_client import HTTPClient, HTTPResponse


class RESTTransport:
    """Sends requests relative to a base URL.

    Bodies that are strings are sent verbatim as text, anything else is
    serialized as JSON.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        auth: tuple[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, auth=auth)

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        if isinstance(body, str):
            return await self._http.request(method, path, data=body, headers=headers)
        return await self._http.request(method, path, json=body, headers=headers)

    async def close(self) -> None:
        await self._http.close()
