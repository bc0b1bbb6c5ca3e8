"""CQ code message model and codec."""

from cqcode.command import DEFAULT_COMMAND_CONFIG, CommandConfig, is_command, parse_command
from cqcode.errors import CQCodeError, InvalidCQCodeError, UnknownFaceError, WrongMediaTypeError
from cqcode.escape import decode_text, decode_value, encode_text, encode_value
from cqcode.media import (
    CACHE_DISABLED,
    CACHE_ENABLED,
    PAPER,
    ROCK,
    SCISSORS,
    At,
    Bface,
    Dice,
    Emoji,
    Face,
    Image,
    Location,
    Media,
    Music,
    NetResource,
    Record,
    Rich,
    Rps,
    Sface,
    Shake,
    Share,
    Show,
    Sign,
    Text,
    media_class,
)
from cqcode.message import (
    Message,
    message_from_segments,
    parse_message,
    parse_message_segments,
    parse_segments_from_array,
    parse_segments_from_string,
)
from cqcode.resource import (
    file_base64,
    file_local,
    image_base64,
    image_local,
    image_web,
    record_base64,
    record_local,
    record_web,
)
from cqcode.segment import Segment, format_cq_code, parse_cq_code, to_media

__all__ = [
    "CACHE_DISABLED",
    "CACHE_ENABLED",
    "DEFAULT_COMMAND_CONFIG",
    "PAPER",
    "ROCK",
    "SCISSORS",
    "At",
    "Bface",
    "CQCodeError",
    "CommandConfig",
    "Dice",
    "Emoji",
    "Face",
    "Image",
    "InvalidCQCodeError",
    "Location",
    "Media",
    "Message",
    "Music",
    "NetResource",
    "Record",
    "Rich",
    "Rps",
    "Segment",
    "Sface",
    "Shake",
    "Share",
    "Show",
    "Sign",
    "Text",
    "UnknownFaceError",
    "WrongMediaTypeError",
    "decode_text",
    "decode_value",
    "encode_text",
    "encode_value",
    "file_base64",
    "file_local",
    "format_cq_code",
    "image_base64",
    "image_local",
    "image_web",
    "is_command",
    "media_class",
    "message_from_segments",
    "parse_command",
    "parse_cq_code",
    "parse_message",
    "parse_message_segments",
    "parse_segments_from_array",
    "parse_segments_from_string",
    "record_base64",
    "record_local",
    "record_web",
    "to_media",
]
