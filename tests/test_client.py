"""Tests for the HTTP API client."""

import json

import httpx
import pytest

from cqcode.media import Face
from qqbot.client import BotClient
from qqbot.errors import ApiError

pytestmark = pytest.mark.asyncio


def make_client(responses: dict[str, dict], requests: list[httpx.Request]) -> BotClient:
    """BotClient whose transport answers each action from ``responses``."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        action = request.url.path.rsplit("/", 1)[-1]
        if action not in responses:
            return httpx.Response(404)
        return httpx.Response(200, json=responses[action])

    return BotClient(
        "http://cqhttp.local:5700/",
        token="secret-token",
        transport=httpx.MockTransport(handler),
    )


async def test_call_posts_json_params() -> None:
    requests: list[httpx.Request] = []
    responses = {"send_msg": {"status": "ok", "retcode": 0, "data": {"message_id": 3}}}
    async with make_client(responses, requests) as client:
        message_id = await client.send_message("group", 42, Face(face_id=14))

    assert message_id == 3
    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == "http://cqhttp.local:5700/send_msg"
    assert request.headers["Authorization"] == "Token secret-token"
    assert json.loads(request.content) == {
        "message_type": "group",
        "group_id": 42,
        "message": "[CQ:face,id=14]",
    }


async def test_failed_status_raises_api_error() -> None:
    requests: list[httpx.Request] = []
    responses = {"delete_msg": {"status": "failed", "retcode": 102}}
    async with make_client(responses, requests) as client:
        with pytest.raises(ApiError) as exc_info:
            await client.delete_msg(5)

    assert exc_info.value.action == "delete_msg"
    assert exc_info.value.retcode == 102


async def test_async_status_is_accepted() -> None:
    requests: list[httpx.Request] = []
    responses = {"send_like": {"status": "async", "retcode": 1}}
    async with make_client(responses, requests) as client:
        resp = await client.send_like(10001, times=3)

    assert resp.ok
    assert json.loads(requests[0].content) == {"user_id": 10001, "times": 3}


async def test_http_error_status() -> None:
    async with make_client({}, []) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await client.call("no_such_action")


async def test_no_token_sends_no_authorization() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"status": "ok", "retcode": 0, "data": None})

    async with BotClient("http://cqhttp.local", transport=httpx.MockTransport(handler)) as client:
        await client.call("get_status")

    assert "Authorization" not in requests[0].headers
