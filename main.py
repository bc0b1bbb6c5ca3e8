"""qqbot entry point - runs a small command echo bot against CQHTTP."""

import asyncio
import logging

from cqcode.message import parse_message
from qqbot.api import ApiMixin
from qqbot.client import BotClient
from qqbot.config import BotConfig, get_config_path, load_config
from qqbot.events import EventEmitter
from qqbot.log import setup_logging
from qqbot.models import Update
from qqbot.sender import Sender
from qqbot.ws_client import WsBotClient

logger = logging.getLogger("qqbot.main")


def build_emitter(client: ApiMixin, config: BotConfig) -> EventEmitter:
    """Wire the demo handlers: "/echo ..." replies with its arguments."""
    emitter = EventEmitter()

    @emitter.on("message")
    async def handle_command(update: Update) -> None:
        if not update.message.is_command(config.command):
            return
        cmd, args = update.message.command(config.command)
        logger.info("Command %r from %s:%s args=%s", cmd, update.chat_type, update.chat_id, args)
        if cmd != "echo" or not args:
            return
        # Arguments are still CQ strings; decode them so media are echoed as media
        sender = Sender(client, update.chat_type, update.chat_id)
        await sender.append(*parse_message(" ".join(args))).send()

    return emitter


async def main() -> None:
    """Connect to CQHTTP and dispatch events until the connection closes."""
    # Load configuration
    config_path = get_config_path()
    config = load_config(config_path)

    # Initialize logging
    setup_logging(config.logging)
    logger.info("qqbot starting up (config: %s)", config_path)

    if not config.api.is_websocket:
        # The HTTP API cannot receive events; just verify the connection
        async with BotClient(
            config.api.endpoint,
            token=config.api.token,
            timeout=config.api.timeout,
            message_format=config.api.message_format,
        ) as http_client:
            me = await http_client.get_login_info()
            logger.info("Logged in as %s (%s) over HTTP", me.nickname, me.user_id)
        return

    async with WsBotClient(
        config.api.endpoint,
        token=config.api.token,
        timeout=config.api.timeout,
        message_format=config.api.message_format,
    ) as client:
        me = await client.get_login_info()
        logger.info("Logged in as %s (%s)", me.nickname, me.user_id)
        emitter = build_emitter(client, config)
        await emitter.run(client.updates())

    logger.info("qqbot shut down.")


if __name__ == "__main__":
    import contextlib

    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(main())
