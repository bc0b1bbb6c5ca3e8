"""Shared pytest fixtures for cqcode/qqbot tests."""

import logging
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from qqbot.api import ApiMixin
from qqbot.errors import ApiError
from qqbot.models import ApiResponse
from tests.mock_cqhttp import MockCqhttp


class RecordingClient(ApiMixin):
    """API client stub that records calls instead of talking to CQHTTP."""

    def __init__(self, message_format: str = "string") -> None:
        self.message_format = message_format
        self.calls: list[tuple[str, dict[str, Any]]] = []
        # action -> data returned in the response
        self.data: dict[str, Any] = {"send_msg": {"message_id": 7}}
        # Actions answered with a failed status
        self.failing: set[str] = set()

    async def call(self, action: str, **params: Any) -> ApiResponse:
        self.calls.append((action, params))
        if action in self.failing:
            raise ApiError(action, "failed", 100)
        return ApiResponse(status="ok", data=self.data.get(action))


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Create a temporary config.toml for testing."""
    config = tmp_path / "config.toml"
    config.write_text(
        "[api]\n"
        'endpoint = "ws://127.0.0.1:6700"\n'
        'token = "abc"\n'
        'message_format = "array"\n\n'
        "[command]\n"
        "strict = true\n"
        'prefix = "!"\n\n'
        "[logging]\n"
        'level = "DEBUG"\n'
        'dir = "' + str(tmp_path / "logs").replace("\\", "/") + '"\n'
        "keep_days = 7\n"
    )
    return config


@pytest.fixture
def restore_root_logger():
    """Undo handler/level changes made to the root logger by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest_asyncio.fixture
async def cqhttp():
    """Start a fake CQHTTP WebSocket server on a random port."""
    server = MockCqhttp()
    await server.start()
    yield server
    await server.stop()
