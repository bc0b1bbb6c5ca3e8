"""CQHTTP WebSocket API client.

Uses two connections: ``/api/`` for request/response actions (matched by
``echo``) and ``/event/`` for pushed events.
"""

import asyncio
import contextlib
import itertools
import json
import logging
from collections.abc import AsyncIterator
from typing import Any

import websockets

from cqcode.errors import CQCodeError
from qqbot.api import ApiMixin
from qqbot.errors import ApiError
from qqbot.models import ApiResponse, Update

logger = logging.getLogger("qqbot.ws_client")


class WsBotClient(ApiMixin):
    """CQHTTP client over the WebSocket API."""

    def __init__(
        self,
        endpoint: str,
        token: str = "",
        timeout: float = 10.0,
        message_format: str = "string",
    ) -> None:
        # Base ws:// or wss:// URL; "/api/" and "/event/" are appended
        self.endpoint = endpoint.rstrip("/")
        self.message_format = message_format
        self._token = token
        self._timeout = timeout
        self._api_ws: websockets.ClientConnection | None = None
        self._event_ws: websockets.ClientConnection | None = None
        # echo -> future waiting for the matching API response
        self._pending: dict[int, asyncio.Future[ApiResponse]] = {}
        self._echo = itertools.count(1)
        self._reader_task: asyncio.Task | None = None

    async def connect(self) -> None:
        """Open the API and event connections.

        Raises:
            OSError / websockets.InvalidHandshake: If either connection fails
        """
        headers = {"Authorization": f"Token {self._token}"} if self._token else None
        self._api_ws = await websockets.connect(
            f"{self.endpoint}/api/", additional_headers=headers
        )
        logger.debug("Connected API websocket %s/api/", self.endpoint)
        try:
            self._event_ws = await websockets.connect(
                f"{self.endpoint}/event/", additional_headers=headers
            )
        except Exception:
            await self._api_ws.close()
            raise
        logger.debug("Connected event websocket %s/event/", self.endpoint)
        self._reader_task = asyncio.create_task(self._read_responses())

    async def close(self) -> None:
        """Close both connections and fail any pending calls."""
        if self._reader_task is not None:
            self._reader_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._reader_task
            self._reader_task = None
        for ws in (self._api_ws, self._event_ws):
            if ws is not None:
                await ws.close()
        self._fail_pending(ConnectionError("client closed"))

    async def __aenter__(self) -> "WsBotClient":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def call(self, action: str, **params: Any) -> ApiResponse:
        """Invoke an API action and wait for the response with the same echo.

        Raises:
            RuntimeError: If the client is not connected
            asyncio.TimeoutError: If no response arrives within the timeout
            ApiError: If CQHTTP reports a failed status
        """
        if self._api_ws is None:
            raise RuntimeError("WsBotClient is not connected")

        echo = next(self._echo)
        future: asyncio.Future[ApiResponse] = asyncio.get_running_loop().create_future()
        self._pending[echo] = future
        try:
            request = {"action": action, "params": params, "echo": echo}
            await self._api_ws.send(json.dumps(request, ensure_ascii=False))
            resp = await asyncio.wait_for(future, timeout=self._timeout)
        finally:
            self._pending.pop(echo, None)

        logger.debug("%s -> %s (echo=%s)", action, resp.status, echo)
        if not resp.ok:
            raise ApiError(action, resp.status, resp.retcode, resp.message)
        return resp

    async def updates(self) -> AsyncIterator[Update]:
        """Yield events from the event connection until it closes."""
        if self._event_ws is None:
            raise RuntimeError("WsBotClient is not connected")
        try:
            async for raw in self._event_ws:
                try:
                    update = Update.from_event(json.loads(raw))
                except (ValueError, TypeError, AttributeError, CQCodeError) as e:
                    logger.warning("Ignoring malformed event: %s (%s)", str(raw)[:200], e)
                    continue
                yield update
        except websockets.ConnectionClosed as e:
            logger.info("Event websocket closed: code=%s reason=%s", e.code, e.reason)

    async def _read_responses(self) -> None:
        """Background task: route API responses to waiting callers by echo."""
        assert self._api_ws is not None
        try:
            async for raw in self._api_ws:
                try:
                    data = json.loads(raw)
                except ValueError:
                    logger.warning("Ignoring non-JSON API response: %s", str(raw)[:200])
                    continue
                if not isinstance(data, dict):
                    continue
                future = self._pending.get(data.get("echo"))  # type: ignore[arg-type]
                if future is None:
                    logger.debug("API response with unknown echo: %s", data.get("echo"))
                    continue
                if not future.done():
                    future.set_result(ApiResponse.from_dict(data))
        except websockets.ConnectionClosed as e:
            logger.info("API websocket closed: code=%s reason=%s", e.code, e.reason)
            self._fail_pending(e)
        else:
            self._fail_pending(ConnectionError("API websocket closed"))

    def _fail_pending(self, exc: BaseException) -> None:
        for future in self._pending.values():
            if not future.done():
                future.set_exception(exc)
        self._pending.clear()
