"""Unit tests for PinataClient against a mocked Pinata API."""

import httpx
import pytest

from fakes import FakePinataServer, parse_multipart_file
from core.exceptions import UpstreamError
from infrastructure.pinata.client import PinataClient


def _client(handler) -> PinataClient:
    return PinataClient(
        jwt="test-jwt",
        api_url="https://api.pinata.test/",
        gateway_url="https://gateway.pinata.test/",
        transport=httpx.MockTransport(handler),
    )


class TestPin:
    @pytest.mark.asyncio
    async def test_sends_multipart_with_bearer_token(self, pinata_server: FakePinataServer):
        client = pinata_server.client()

        ipfs_hash = await client.pin(b"payload", "notes.txt", "text/plain")
        await client.close()

        request = pinata_server.requests[0]
        assert request.headers["authorization"] == "Bearer test-jwt"
        assert request.headers["content-type"].startswith("multipart/form-data")
        headers, content = parse_multipart_file(request)
        assert 'filename="notes.txt"' in headers
        assert "text/plain" in headers
        assert content == b"payload"
        assert ipfs_hash in pinata_server.pinned

    @pytest.mark.asyncio
    async def test_error_status_raises_upstream_error(self):
        client = _client(lambda request: httpx.Response(403, json={"error": "forbidden"}))

        with pytest.raises(UpstreamError) as exc_info:
            await client.pin(b"x", "f", "application/octet-stream")
        await client.close()

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == {"error": "forbidden"}

    @pytest.mark.asyncio
    async def test_missing_hash_raises_upstream_error(self):
        client = _client(lambda request: httpx.Response(200, json={"unexpected": True}))

        with pytest.raises(UpstreamError):
            await client.pin(b"x", "f", "application/octet-stream")
        await client.close()

    @pytest.mark.asyncio
    async def test_network_error_raises_upstream_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)

        with pytest.raises(UpstreamError):
            await client.pin(b"x", "f", "application/octet-stream")
        await client.close()


class TestFetch:
    @pytest.mark.asyncio
    async def test_reads_json_from_gateway(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"level": 4})

        client = _client(handler)

        assert await client.fetch("QmAbc") == {"level": 4}
        await client.close()

        assert str(seen[0].url) == "https://gateway.pinata.test/ipfs/QmAbc"
        assert seen[0].headers["accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_timeout_raises_upstream_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = _client(handler)

        with pytest.raises(UpstreamError):
            await client.fetch("QmAbc")
        await client.close()

    @pytest.mark.asyncio
    async def test_non_json_raises_upstream_error(self):
        client = _client(lambda request: httpx.Response(200, text="<html>gateway</html>"))

        with pytest.raises(UpstreamError):
            await client.fetch("QmAbc")
        await client.close()

    @pytest.mark.asyncio
    async def test_not_found_raises_upstream_error(self):
        client = _client(lambda request: httpx.Response(404, text="not found"))

        with pytest.raises(UpstreamError) as exc_info:
            await client.fetch("QmMissing")
        await client.close()

        assert exc_info.value.status_code == 404
