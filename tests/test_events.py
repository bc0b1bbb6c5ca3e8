"""Tests for the event emitter."""

import pytest

from qqbot.events import EventEmitter
from qqbot.models import Update

pytestmark = pytest.mark.asyncio


def group_message(text: str = "hi") -> Update:
    return Update.from_event(
        {
            "post_type": "message",
            "message_type": "group",
            "sub_type": "normal",
            "group_id": 42,
            "user_id": 10001,
            "message": text,
        }
    )


async def test_dispatch_most_specific_first() -> None:
    emitter = EventEmitter()
    seen: list[str] = []

    emitter.on("message", lambda u: seen.append("message"))
    emitter.on("message.group", lambda u: seen.append("message.group"))
    emitter.on("message.group.normal", lambda u: seen.append("message.group.normal"))
    emitter.on("message.private", lambda u: seen.append("message.private"))

    await emitter.dispatch(group_message())

    assert seen == ["message.group.normal", "message.group", "message"]


async def test_decorator_and_async_handler() -> None:
    emitter = EventEmitter()
    received: list[Update] = []

    @emitter.on("message.group")
    async def handle(update: Update) -> None:
        received.append(update)

    update = group_message()
    await emitter.dispatch(update)

    assert received == [update]
    assert emitter.handler_count("message.group") == 1


async def test_unsubscribe() -> None:
    emitter = EventEmitter()
    calls: list[int] = []

    unsubscribe = emitter.on("message", lambda u: calls.append(1))
    await emitter.dispatch(group_message())
    unsubscribe()
    await emitter.dispatch(group_message())

    assert calls == [1]
    assert emitter.handler_count("message") == 0
    # Removing twice is harmless
    unsubscribe()


async def test_failing_handler_does_not_stop_others(caplog: pytest.LogCaptureFixture) -> None:
    emitter = EventEmitter()
    calls: list[str] = []

    async def broken(update: Update) -> None:
        raise RuntimeError("boom")

    emitter.on("message", broken)
    emitter.on("message", lambda u: calls.append("ok"))

    await emitter.emit("message", group_message())

    assert calls == ["ok"]
    assert "boom" in caplog.text


async def test_run_consumes_stream() -> None:
    emitter = EventEmitter()
    texts: list[str] = []
    emitter.on("message", lambda u: texts.append(u.message.extract_plain_text()))

    async def stream():
        for text in ("a", "b", "c"):
            yield group_message(text)

    await emitter.run(stream())

    assert texts == ["a", "b", "c"]
