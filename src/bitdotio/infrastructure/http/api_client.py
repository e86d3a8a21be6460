"""Authenticated httpx client for the bit.io developer API."""

import json
import logging
from typing import Any

import httpx

from bitdotio.application.ports import FileParts
from bitdotio.constants import API_URL, API_VERSION, USER_AGENT
from bitdotio.domain.exceptions import APIError, APIRequestError, ResponseDecodeError

logger = logging.getLogger(__name__)


class DefaultAPIClient:
    """Developer API client over ``httpx.AsyncClient``.

    Paths are relative to ``<base_url>/<API_VERSION>/``. Responses are decoded
    from JSON; an empty body decodes to None.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = API_URL,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._base_url = f"{base_url.rstrip('/')}/{API_VERSION}/"
        self._headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {access_token}",
            "User-Agent": USER_AGENT,
        }

    def url_for(self, path: str) -> str:
        return self._base_url + path.lstrip("/")

    async def call(self, method: str, path: str, body: Any = None) -> Any:
        """Send a JSON request and return the decoded response."""
        return await self._send(method, path, json=body)

    async def call_multipart(
        self,
        method: str,
        path: str,
        fields: dict[str, str],
        files: FileParts | None = None,
    ) -> Any:
        """Send a multipart/form-data request and return the decoded response."""
        if files:
            return await self._send(method, path, data=fields, files=files)
        # httpx only encodes multipart when files are present
        parts = {key: (None, value) for key, value in fields.items()}
        return await self._send(method, path, files=parts)

    async def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self.url_for(path)
        logger.debug("%s %s", method, url)
        try:
            response = await self._client.request(method, url, headers=self._headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error("request failed: %s %s: %s", method, url, e)
            raise APIRequestError(f"request failed with error: {e}") from e

        if response.status_code >= 400:
            logger.error("%s %s returned %s: %s", method, url, response.status_code, response.text)
            raise APIError(response.status_code, response.text)

        if not response.content:
            return None
        try:
            return response.json()
        except json.JSONDecodeError as e:
            logger.error("invalid JSON from %s %s: %s", method, url, e)
            raise ResponseDecodeError(f"JSON decoding failed: {e}") from e

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "DefaultAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
