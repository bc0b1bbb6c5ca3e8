"""Chainable message builder.

Every builder call returns a new ``Sender``; the original is never modified,
so a partially built sender can be reused as a template::

    greeting = Sender(client, "group", 123).at("456").text(" hi ")
    await greeting.face_by_name("微笑").send()

Media that CQHTTP only accepts as a message of their own (records, dice,
music cards, ...) are sent immediately by their builder method.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from cqcode.errors import UnknownFaceError
from cqcode.media import (
    At,
    Bface,
    Dice,
    Emoji,
    Face,
    Location,
    Media,
    Music,
    Rps,
    Sface,
    Shake,
    Share,
    Show,
    Sign,
    Text,
)
from cqcode.message import Message
from cqcode.resource import (
    FileSource,
    image_base64,
    image_local,
    image_web,
    record_base64,
    record_local,
    record_web,
)
from qqbot.api import ApiMixin

logger = logging.getLogger("qqbot.sender")


@dataclass(frozen=True)
class Sender:
    """Accumulates media for one chat and sends them as one message."""

    client: ApiMixin
    # "private", "group" or "discuss"
    chat_type: str
    chat_id: int
    # Media queued for the next send()
    media: tuple[Media, ...] = ()
    # Message id returned by the last send() (None before sending)
    result: int | None = None

    @property
    def message(self) -> Message:
        return Message(self.media)

    def append(self, *media: Media) -> "Sender":
        return replace(self, media=self.media + media, result=None)

    # --- Inline media ---

    def text(self, text: str) -> "Sender":
        return self.append(Text(text=text))

    def new_line(self) -> "Sender":
        return self.append(Text(text="\n"))

    def at(self, qq: str | int) -> "Sender":
        return self.append(At(qq=str(qq)))

    def face(self, face_id: int) -> "Sender":
        return self.append(Face(face_id=face_id))

    def face_by_name(self, name: str) -> "Sender":
        """Append a face by display name; unknown names are skipped."""
        try:
            return self.append(Face.from_name(name))
        except UnknownFaceError as e:
            logger.warning("Skipping face: %s", e)
            return self

    def emoji(self, emoji_id: int) -> "Sender":
        return self.append(Emoji(emoji_id=emoji_id))

    def sface(self, sface_id: int) -> "Sender":
        return self.append(Sface(sface_id=sface_id))

    def image_base64(self, source: FileSource) -> "Sender":
        return self.append(image_base64(source))

    def image_local(self, path: str | Path) -> "Sender":
        return self.append(image_local(path))

    def image_web(self, url: str) -> "Sender":
        return self.append(image_web(url))

    # --- Sending ---

    async def send(self) -> "Sender":
        """Send the queued media.

        Returns:
            An empty sender for the same chat whose ``result`` is the message id

        Raises:
            Whatever the client raises (ApiError, transport errors)
        """
        message_id = await self.client.send_message(self.chat_type, self.chat_id, self.message)
        logger.debug(
            "Sent %d element(s) to %s:%s (message_id=%s)",
            len(self.media),
            self.chat_type,
            self.chat_id,
            message_id,
        )
        return replace(self, media=(), result=message_id)

    # --- Standalone media (sent immediately, together with anything queued) ---

    async def record_base64(self, source: FileSource, magic: bool = False) -> "Sender":
        return await self.append(record_base64(source, magic)).send()

    async def record_local(self, path: str | Path, magic: bool = False) -> "Sender":
        return await self.append(record_local(path, magic)).send()

    async def record_web(self, url: str, magic: bool = False) -> "Sender":
        return await self.append(record_web(url, magic)).send()

    async def bface(self, bface_id: int) -> "Sender":
        return await self.append(Bface(bface_id=bface_id)).send()

    async def rps(self) -> "Sender":
        return await self.append(Rps()).send()

    async def dice(self) -> "Sender":
        return await self.append(Dice()).send()

    async def shake(self) -> "Sender":
        return await self.append(Shake()).send()

    async def music(self, music: Music) -> "Sender":
        return await self.append(music).send()

    async def share(self, share: Share) -> "Sender":
        return await self.append(share).send()

    async def location(self, location: Location) -> "Sender":
        return await self.append(location).send()

    async def show(self, show_id: int) -> "Sender":
        return await self.append(Show(show_id=show_id)).send()

    async def sign(self, sign: Sign) -> "Sender":
        return await self.append(sign).send()
