"""Message container and whole-message conversion.

CQHTTP delivers a message either as a CQ string or as an array of segments,
depending on its ``post_message_format`` setting. Both decode into the same
``Message``; both encodings can be produced from it.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from cqcode.command import DEFAULT_COMMAND_CONFIG, CommandConfig, is_command, parse_command
from cqcode.errors import CQCodeError
from cqcode.escape import decode_text
from cqcode.media import At, Media, Text
from cqcode.segment import Segment, format_cq_code, to_media

logger = logging.getLogger("cqcode.message")

_CQ_CODE_RE = re.compile(r"\[CQ:[\s\S]*?\]")

# Accepted values of message_format
MESSAGE_FORMATS = ("string", "array")


class Message(list[Media]):
    """Ordered sequence of elements; list order is transmission order."""

    def cq_string(self) -> str:
        """Encode the whole message as a CQ string."""
        return "".join(format_cq_code(media) for media in self)

    def segments(self) -> list[Segment]:
        """Encode the whole message as segments, skipping elements that fail."""
        segs: list[Segment] = []
        for media in self:
            try:
                segs.append(Segment.from_media(media))
            except (AttributeError, TypeError) as e:
                logger.warning("Skipping unencodable element %r: %s", media, e)
        return segs

    def to_payload(self, message_format: str = "string") -> str | list[dict[str, Any]]:
        """Encode for an API request in the given format ("string" or "array")."""
        if message_format == "array":
            return [seg.to_dict() for seg in self.segments()]
        if message_format == "string":
            return self.cq_string()
        raise ValueError(f"Unknown message format: {message_format}")

    def extract_plain_text(self) -> str:
        """Concatenate the text elements, ignoring all other media."""
        return "".join(media.text for media in self if isinstance(media, Text))

    def mentions(self, user_id: int | str) -> bool:
        """Return True if the message @-mentions ``user_id``."""
        qq = str(user_id)
        return any(isinstance(media, At) and media.qq == qq for media in self)

    def is_command(self, config: CommandConfig = DEFAULT_COMMAND_CONFIG) -> bool:
        return is_command(self.cq_string(), config)

    def command(self, config: CommandConfig = DEFAULT_COMMAND_CONFIG) -> tuple[str, list[str]]:
        """Split the message into a command and its arguments (see ``parse_command``)."""
        return parse_command(self.cq_string(), config)

    @classmethod
    def of(cls, *items: "Media | str") -> "Message":
        """Build a message from elements; plain strings become ``Text``."""
        return cls(Text(text=item) if isinstance(item, str) else item for item in items)


def parse_segments_from_string(text: str) -> list[Segment]:
    """Split a CQ string into segments.

    Text between CQ codes becomes ``text`` segments. A CQ code that fails to
    decode is dropped and scanning continues.
    """
    segs: list[Segment] = []
    pos = 0
    for match in _CQ_CODE_RE.finditer(text):
        if match.start() > pos:
            segs.append(Segment(type="text", data={"text": decode_text(text[pos : match.start()])}))
        pos = match.end()
        try:
            segs.append(Segment.from_cq_code(match.group()))
        except CQCodeError as e:
            logger.warning("Dropping undecodable CQ code %s: %s", match.group()[:100], e)
    if len(text) > pos:
        segs.append(Segment(type="text", data={"text": decode_text(text[pos:])}))
    return segs


def parse_segments_from_array(items: Iterable[Any]) -> list[Segment]:
    """Convert wire segment objects to segments, skipping malformed ones."""
    segs: list[Segment] = []
    for item in items:
        try:
            segs.append(Segment.from_dict(item))
        except CQCodeError as e:
            logger.warning("Skipping malformed segment: %s", e)
    return segs


def parse_message_segments(raw: Any) -> list[Segment]:
    """Parse a ``message`` field that may be a CQ string or a segment array.

    Raises:
        CQCodeError: If ``raw`` is neither a string nor a list
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        return parse_segments_from_string(raw)
    if isinstance(raw, (list, tuple)):
        return parse_segments_from_array(raw)
    raise CQCodeError(f"Unsupported message payload type: {type(raw).__name__}")


def message_from_segments(segs: Iterable[Segment]) -> Message:
    """Decode segments into typed elements.

    Unknown kinds are kept as ``Segment`` elements; a segment whose values
    cannot be decoded is skipped.
    """
    message = Message()
    for seg in segs:
        try:
            message.append(to_media(seg))
        except CQCodeError as e:
            logger.warning("Skipping undecodable %s segment: %s", seg.type, e)
    return message


def parse_message(raw: Any) -> Message:
    """Parse a ``message`` field (CQ string or segment array) into a ``Message``.

    Raises:
        CQCodeError: If ``raw`` is neither a string nor a list
    """
    return message_from_segments(parse_message_segments(raw))
