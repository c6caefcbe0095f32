"""Precise unit tests for RESTTransport.

Tests focus on HTTPClient delegation and body encoding.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from osdf.client.runtime.rest import HTTPResponse, RESTTransport


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        """Test RESTTransport initialization."""
        transport = RESTTransport(base_url="http://localhost:8123", timeout=5.0)
        assert transport._http.base_url == "http://localhost:8123"
        assert transport._http.timeout.total == 5.0

    @pytest.mark.asyncio
    async def test_mapping_body_sent_as_json(self):
        transport = RESTTransport(base_url="http://localhost:8123")
        transport._http.request = AsyncMock(return_value=HTTPResponse(status=200))

        await transport.request("POST", "/nodes/query/test", body={"query": {}})

        transport._http.request.assert_called_once_with(
            "POST", "/nodes/query/test", json={"query": {}}, headers=None
        )

    @pytest.mark.asyncio
    async def test_string_body_sent_verbatim(self):
        transport = RESTTransport(base_url="http://localhost:8123")
        transport._http.request = AsyncMock(return_value=HTTPResponse(status=200))

        await transport.request("POST", "/nodes/oql/test", body='"sample"[node_type]')

        transport._http.request.assert_called_once_with(
            "POST", "/nodes/oql/test", data='"sample"[node_type]', headers=None
        )

    @pytest.mark.asyncio
    async def test_no_body(self):
        transport = RESTTransport(base_url="http://localhost:8123")
        transport._http.request = AsyncMock(return_value=HTTPResponse(status=204))

        result = await transport.request("DELETE", "/nodes/abc")

        assert result.status == 204
        transport._http.request.assert_called_once_with(
            "DELETE", "/nodes/abc", json=None, headers=None
        )

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        """Test close() delegates to HTTPClient."""
        transport = RESTTransport(base_url="http://localhost:8123")
        transport._http.close = AsyncMock()

        await transport.close()

        transport._http.close.assert_called_once()
