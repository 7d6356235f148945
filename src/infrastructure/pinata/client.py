"""Pinata pinning API and gateway client."""

from typing import Any

import httpx

from core.config import settings
from core.exceptions import UpstreamError

SERVICE_NAME = "pinata"


def _error_detail(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class PinataClient:
    """Blob transport backed by Pinata.

    Uploads go to ``pinFileToIPFS`` as multipart form data with a bearer
    JWT; reads go through the public gateway.
    """

    def __init__(
        self,
        jwt: str = settings.pinata_jwt,
        api_url: str = settings.pinata_api_url,
        gateway_url: str = settings.pinata_gateway_url,
        fetch_timeout: float = settings.pinata_fetch_timeout,
        upload_timeout: float | None = settings.pinata_upload_timeout,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._jwt = jwt
        self._api_url = api_url.rstrip("/")
        self._gateway_url = gateway_url.rstrip("/")
        self._fetch_timeout = fetch_timeout
        self._upload_timeout = upload_timeout
        self._client = httpx.AsyncClient(transport=transport)

    async def close(self) -> None:
        await self._client.aclose()

    async def pin(self, content: bytes, filename: str, content_type: str) -> str:
        """Upload content to ``pinFileToIPFS`` and return the IPFS hash."""
        try:
            response = await self._client.post(
                f"{self._api_url}/pinning/pinFileToIPFS",
                files={"file": (filename, content, content_type)},
                headers={"Authorization": f"Bearer {self._jwt}"},
                timeout=self._upload_timeout,
            )
        except httpx.HTTPError as e:
            raise UpstreamError(SERVICE_NAME, str(e) or type(e).__name__) from e

        if response.is_error:
            raise UpstreamError(SERVICE_NAME, _error_detail(response), response.status_code)

        try:
            content_hash = response.json()["IpfsHash"]
        except (ValueError, KeyError, TypeError) as e:
            raise UpstreamError(
                SERVICE_NAME, f"unexpected response: {response.text[:200]}", response.status_code
            ) from e
        return str(content_hash)

    async def fetch(self, content_hash: str) -> Any:
        """Read JSON content for ``content_hash`` from the gateway."""
        try:
            response = await self._client.get(
                f"{self._gateway_url}/ipfs/{content_hash}",
                headers={"Accept": "application/json"},
                timeout=self._fetch_timeout,
            )
        except httpx.HTTPError as e:
            raise UpstreamError(SERVICE_NAME, str(e) or type(e).__name__) from e

        if response.is_error:
            raise UpstreamError(SERVICE_NAME, _error_detail(response), response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                SERVICE_NAME, "gateway returned non-JSON content", response.status_code
            ) from e
