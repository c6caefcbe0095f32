"""Unit tests for the error-first callback invocation style."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from osdf.client import OSDFClient, RequestError, SearchResults, ServerInfo
from osdf.client.api import callback_compatible, deliver
from osdf.client.runtime.rest import HTTPResponse, RESTTransport

INFO_BODY = '{"api_version": "1.0", "title": "OSDF"}'


@pytest.fixture
def mock_transport():
    transport = MagicMock(spec=RESTTransport)
    transport.request = AsyncMock(return_value=HTTPResponse(status=200, body=INFO_BODY))
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def client(mock_transport):
    return OSDFClient(transport=mock_transport)


class TestCallbacksInsideEventLoop:
    @pytest.mark.asyncio
    async def test_success_delivered_to_callback(self, client):
        done = asyncio.get_running_loop().create_future()

        task = client.info(callback=lambda err, info: done.set_result((err, info)))

        assert isinstance(task, asyncio.Task)
        err, info = await done
        assert err is None
        assert isinstance(info, ServerInfo)
        assert info.title == "OSDF"

    @pytest.mark.asyncio
    async def test_error_delivered_to_callback(self, client, mock_transport):
        mock_transport.request.return_value = HTTPResponse(
            status=403, headers={"x-osdf-error": "Access denied"}
        )
        done = asyncio.get_running_loop().create_future()

        client.delete_node("abc", callback=lambda err, result: done.set_result((err, result)))

        err, result = await done
        assert isinstance(err, RequestError)
        assert str(err) == "Access denied"
        assert result is None

    @pytest.mark.asyncio
    async def test_session_not_closed_inside_loop(self, client, mock_transport):
        done = asyncio.get_running_loop().create_future()
        client.info(callback=lambda err, info: done.set_result(info))
        await done
        mock_transport.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_query_all_with_callback(self, client, mock_transport):
        mock_transport.request.side_effect = [
            HTTPResponse(status=200, body='{"results": [1, 2], "page": 1}'),
            HTTPResponse(status=200, body='{"results": [], "page": 2}'),
        ]
        done = asyncio.get_running_loop().create_future()

        client.query_all({}, "test", callback=lambda err, res: done.set_result((err, res)))

        err, results = await done
        assert err is None
        assert results == SearchResults.from_results([1, 2])

    @pytest.mark.asyncio
    async def test_cancellation_reported(self):
        done = asyncio.get_running_loop().create_future()

        async def never():
            await asyncio.Event().wait()

        task = deliver(never(), lambda err, result: done.set_result(err))
        await asyncio.sleep(0)
        task.cancel()

        assert isinstance(await done, asyncio.CancelledError)


class TestCallbacksWithoutEventLoop:
    def test_blocks_and_delivers_result(self, client, mock_transport):
        received = []

        returned = client.info(callback=lambda err, info: received.append((err, info)))

        assert returned is None
        assert len(received) == 1
        err, info = received[0]
        assert err is None
        assert info.api_version == "1.0"
        mock_transport.close.assert_awaited_once()

    def test_blocks_and_delivers_error(self, client, mock_transport):
        mock_transport.request.return_value = HTTPResponse(status=500, reason="Server Error")
        received = []

        client.get_namespaces(callback=lambda err, data: received.append((err, data)))

        err, data = received[0]
        assert isinstance(err, RequestError)
        assert data is None
        mock_transport.close.assert_awaited_once()

    def test_validation_errors_go_to_callback(self, client, mock_transport):
        received = []

        client.get_node("", callback=lambda err, node: received.append(err))

        assert isinstance(received[0], ValueError)
        mock_transport.request.assert_not_called()

    def test_callback_exceptions_propagate(self, client):
        def explode(err, info):
            raise RuntimeError("callback bug")

        with pytest.raises(RuntimeError, match="callback bug"):
            client.info(callback=explode)


class TestCallbackCompatible:
    def test_without_callback_returns_awaitable(self, client):
        coro = client.info()
        assert asyncio.iscoroutine(coro)
        coro.close()

    def test_non_callable_callback_rejected(self, client):
        with pytest.raises(TypeError):
            client.info(callback="not callable")

    def test_wraps_preserve_metadata(self):
        class Thing:
            @callback_compatible
            async def work(self, x):
                """Do work."""
                return x * 2

            async def close(self):
                pass

        assert Thing.work.__name__ == "work"
        assert Thing.work.__doc__ == "Do work."

        received = []
        Thing().work(21, callback=lambda err, value: received.append(value))
        assert received == [42]
