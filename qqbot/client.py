"""CQHTTP HTTP API client."""

import logging
from typing import Any

import httpx

from qqbot.api import ApiMixin
from qqbot.errors import ApiError
from qqbot.models import ApiResponse

logger = logging.getLogger("qqbot.client")


class BotClient(ApiMixin):
    """CQHTTP client over the HTTP API.

    Each action is a POST of JSON params to ``{endpoint}/{action}``.
    """

    def __init__(
        self,
        endpoint: str,
        token: str = "",
        timeout: float = 10.0,
        message_format: str = "string",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            endpoint: Base URL of the CQHTTP HTTP API (e.g. "http://127.0.0.1:5700")
            token: access_token configured in CQHTTP, sent as an Authorization header
            timeout: Request timeout in seconds
            message_format: "string" or "array"; encoding of outgoing messages
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.endpoint = endpoint.rstrip("/")
        self.message_format = message_format
        headers = {"Authorization": f"Token {token}"} if token else {}
        self._client = httpx.AsyncClient(timeout=timeout, headers=headers, transport=transport)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "BotClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def call(self, action: str, **params: Any) -> ApiResponse:
        """Invoke an API action.

        Raises:
            httpx.HTTPError: If the request fails or returns an HTTP error status
            ApiError: If CQHTTP reports a failed status
        """
        resp = await self._client.post(f"{self.endpoint}/{action}", json=params)
        resp.raise_for_status()
        api_resp = ApiResponse.from_dict(resp.json())
        logger.debug("%s -> %s %s", action, api_resp.status, resp.text[:200])
        if not api_resp.ok:
            raise ApiError(action, api_resp.status, api_resp.retcode, api_resp.message)
        return api_resp
