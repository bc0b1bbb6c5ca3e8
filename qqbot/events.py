"""Event emitter that routes updates to handlers by event name.

Names are dotted: ``post_type[.detail_type[.sub_type]]``, e.g.
``"message"``, ``"message.group"``, ``"notice.group_increase.invite"``. An
update is emitted under every name it matches, most specific first.
"""

import inspect
import logging
from collections.abc import AsyncIterable, Awaitable, Callable

from qqbot.models import Update

logger = logging.getLogger("qqbot.events")

# Handlers may be plain functions or coroutines
Handler = Callable[[Update], Awaitable[None] | None]
Unsubscribe = Callable[[], None]


class EventEmitter:
    """Registry of event handlers."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}

    def on(self, event: str, handler: Handler | None = None):
        """Subscribe ``handler`` to ``event``; returns a function that unsubscribes it.

        Without ``handler``, works as a decorator::

            @emitter.on("message.private")
            async def handle(update): ...
        """
        if handler is None:

            def decorator(func: Handler) -> Handler:
                self.on(event, func)
                return func

            return decorator

        self._subscribers.setdefault(event, []).append(handler)
        logger.debug("Subscribed %s to %s", getattr(handler, "__name__", handler), event)

        def unsubscribe() -> None:
            self.off(event, handler)

        return unsubscribe

    def off(self, event: str, handler: Handler) -> None:
        """Remove ``handler`` from ``event`` (no-op if not subscribed)."""
        handlers = self._subscribers.get(event)
        if not handlers:
            return
        self._subscribers[event] = [h for h in handlers if h is not handler]

    def handler_count(self, event: str) -> int:
        return len(self._subscribers.get(event, []))

    async def emit(self, event: str, update: Update) -> None:
        """Call every handler of ``event`` in subscription order.

        A failing handler is logged and does not stop the others.
        """
        for handler in list(self._subscribers.get(event, [])):
            try:
                result = handler(update)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.exception("Error in handler for %s: %s", event, e)

    async def dispatch(self, update: Update) -> None:
        """Emit ``update`` under all of its event names."""
        for name in update.event_names():
            await self.emit(name, update)

    async def run(self, updates: AsyncIterable[Update]) -> None:
        """Dispatch every update from ``updates`` until the stream ends."""
        async for update in updates:
            await self.dispatch(update)
