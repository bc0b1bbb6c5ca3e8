"""Message segments and single-CQ-code encoding/decoding.

A ``Segment`` is the loosely typed ``{"type": ..., "data": {...}}`` record
CQHTTP uses for array-format messages. It is also the pass-through element
for CQ codes whose kind has no registered element class, so unknown media
survive a decode/encode cycle unchanged.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from cqcode.errors import CQCodeError, InvalidCQCodeError, WrongMediaTypeError
from cqcode.escape import decode_text, decode_value, encode_text, encode_value, format_value
from cqcode.media import Media, Text, coerce, media_class

logger = logging.getLogger("cqcode.segment")

_CQ_PREFIX = "[CQ:"

M = TypeVar("M", bound=Media)


@dataclass
class Segment(Media):
    """A ``{type, data}`` message segment."""

    # CQ function name, e.g. "image"
    type: str
    # Field values keyed by CQ key, in first-seen order
    data: dict[str, Any] = field(default_factory=dict)

    @property  # type: ignore[override]
    def kind(self) -> str:
        return self.type

    def cq_items(self) -> list[tuple[str, Any]]:
        return list(self.data.items())

    @classmethod
    def from_media(cls, media: Media) -> "Segment":
        """Build the segment form of any element."""
        if isinstance(media, Segment):
            return cls(type=media.type, data=dict(media.data))
        return cls(type=media.kind, data=dict(media.cq_items()))

    @classmethod
    def from_dict(cls, raw: Any) -> "Segment":
        """Build a segment from a wire JSON object.

        Raises:
            CQCodeError: If the object has no ``type`` or its ``data`` is not a mapping
        """
        if not isinstance(raw, Mapping) or not raw.get("type"):
            raise CQCodeError(f"invalid message segment: {raw!r}")
        data = raw.get("data") or {}
        if not isinstance(data, Mapping):
            raise CQCodeError(f"invalid message segment data: {data!r}")
        return cls(type=str(raw["type"]), data=dict(data))

    @classmethod
    def from_cq_code(cls, text: str) -> "Segment":
        """Parse one CQ code; anything else becomes a text segment."""
        return parse_cq_code(text, cls)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "data": dict(self.data)}

    def to_media(self, target: type[M]) -> M:
        """Decode this segment into an instance of ``target``.

        Matching keys are copied (weakly typed), unknown keys are ignored and
        missing keys keep the element's defaults.

        Raises:
            WrongMediaTypeError: If ``target`` is a different kind; matching
                fields are still copied into ``err.media``
            CQCodeError: If a value cannot be converted to its field type
        """
        if issubclass(target, Segment):
            return target(type=self.type, data=dict(self.data))  # type: ignore[return-value]

        media = target()
        bad_keys: list[str] = []
        for spec in target.cq_fields:
            if spec.key not in self.data:
                continue
            try:
                setattr(media, spec.attr, coerce(self.data[spec.key], spec.type))
            except (TypeError, ValueError):
                bad_keys.append(spec.key)

        if self.type != target.kind:
            raise WrongMediaTypeError(media=media)
        if bad_keys:
            raise CQCodeError(
                f"cannot decode fields {', '.join(bad_keys)} of {self.type}", media=media
            )
        return media

    def cq_string(self) -> str:
        return format_cq_code(self)


def format_cq_code(media: Media) -> str:
    """Encode one element as CQ text.

    Text elements become escaped plain text; everything else becomes a
    ``[CQ:kind,key=value,...]`` marker.
    """
    if media.kind == "text":
        if isinstance(media, Segment):
            if "text" not in media.data:
                return ""
            return encode_text(format_value(media.data["text"]))
        return encode_text(format_value(getattr(media, "text", "")))

    parts = [media.kind]
    for key, value in media.cq_items():
        parts.append(f"{key}={encode_value(format_value(value))}")
    return f"{_CQ_PREFIX}{','.join(parts)}]"


def is_cq_code(text: str) -> bool:
    """Return True if ``text`` has the shape of a single CQ code."""
    return len(text) > 5 and text.startswith(_CQ_PREFIX) and text.endswith("]")


def parse_cq_code(text: str, target: type[M]) -> M:
    """Decode a single CQ code into an element of type ``target``.

    A string that is not a CQ code is treated as escaped plain text, which
    only ``Text`` and ``Segment`` targets accept.

    Raises:
        InvalidCQCodeError: If ``text`` is not a CQ code and ``target`` is not a text holder
        WrongMediaTypeError: If the CQ code kind differs from ``target``
    """
    if not is_cq_code(text):
        plain = decode_text(text)
        if issubclass(target, Segment):
            return target(type="text", data={"text": plain})  # type: ignore[return-value]
        if issubclass(target, Text):
            return target(text=plain)  # type: ignore[return-value]
        raise InvalidCQCodeError()

    kind, *items = text[len(_CQ_PREFIX) : -1].split(",")
    data: dict[str, Any] = {}
    for item in items:
        key, _, value = item.partition("=")
        data[key] = decode_value(value)
    return Segment(type=kind, data=data).to_media(target)


def to_media(segment: Segment) -> Media:
    """Decode a segment into its registered element class.

    Segments of unknown kinds are returned as-is.
    """
    cls = media_class(segment.type)
    if cls is None:
        logger.debug("Keeping unknown segment kind %s as pass-through", segment.type)
        return Segment(type=segment.type, data=dict(segment.data))
    return segment.to_media(cls)
