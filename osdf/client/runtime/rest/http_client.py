"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...core.exceptions import TransportError


@dataclass(frozen=True)
class HTTPResponse:
    """Fully read HTTP response.

    Header names are lower-cased.
    """

    status: int
    reason: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        auth: tuple[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.auth = aiohttp.BasicAuth(*auth) if auth else None
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, auth=self.auth)
        return self._session

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        data: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """Send a request and read the whole response.

        Non-2xx statuses are returned, not raised; callers decide which
        statuses are acceptable.

        Raises:
            TransportError: If no response could be obtained
        """
        url = self._url(url)
        try:
            async with self.session.request(
                method, url, json=json, data=data, headers=headers
            ) as response:
                body = await response.text()
                return HTTPResponse(
                    status=response.status,
                    reason=response.reason,
                    headers={k.lower(): v for k, v in response.headers.items()},
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {url} failed: {str(e) or type(e).__name__}") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
