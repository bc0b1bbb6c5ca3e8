"""Typed message elements ("media") that can appear in a CQ message.

Every element type is a dataclass registered under its CQ code function
name (``kind``). The dataclass fields carry their CQ key in the field
metadata; ``register`` turns that into an ordered field table once per class,
and the same table drives both encoding and decoding.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, TypeVar

from cqcode.errors import UnknownFaceError
from cqcode.escape import format_value
from cqcode.faces import FACE_IDS, FACE_NAMES

logger = logging.getLogger("cqcode.media")

# kind -> element class, filled by @register
MEDIA_TYPES: dict[str, type["Media"]] = {}

# Values of NetResource.cache
CACHE_ENABLED = 1
CACHE_DISABLED = 0

# Values of Rps.type
ROCK = 1
PAPER = 2
SCISSORS = 3

M = TypeVar("M", bound="Media")


@dataclass(frozen=True)
class FieldSpec:
    """One entry of an element's field table."""

    # Key used inside the CQ code / segment data
    key: str
    # Python attribute holding the value
    attr: str
    # Target type for weakly typed decoding (str, int or bool)
    type: type
    # Optional fields are emitted only when not None, after all regular fields
    optional: bool = False


def cq_field(
    key: str,
    default: Any,
    type_: type | None = None,
    optional: bool = False,
    kw_only: bool = False,
) -> Any:
    """Declare a dataclass field that maps to CQ code key ``key``.

    Mixin fields should be ``kw_only`` so they never take the place of the
    element's own first positional field.
    """
    spec = {"key": key, "type": type_ or type(default), "optional": optional}
    return field(default=default, kw_only=kw_only, metadata={"cq": spec})


def coerce(value: Any, type_: type) -> Any:
    """Convert a loosely typed wire value to ``type_``.

    Accepts the forms CQHTTP uses: numbers and booleans may arrive as
    strings, and an empty string means the zero value.

    Raises:
        ValueError: If the value cannot be represented as ``type_``
    """
    if value is None:
        return None
    if type_ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        text = str(value).strip().lower()
        if text in ("1", "t", "true", "yes", "on"):
            return True
        if text in ("", "0", "f", "false", "no", "off"):
            return False
        raise ValueError(f"cannot convert {value!r} to bool")
    if type_ is int:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value)
        text = str(value).strip()
        return int(text) if text else 0
    return format_value(value)


class Media:
    """Base class of all typed elements."""

    # CQ function name; constant per class
    kind: ClassVar[str] = ""
    # Ordered field table, built by @register
    cq_fields: ClassVar[tuple[FieldSpec, ...]] = ()

    def cq_items(self) -> list[tuple[str, Any]]:
        """Return ``(key, value)`` pairs in wire order, skipping unset optional fields."""
        items: list[tuple[str, Any]] = []
        for spec in self.cq_fields:
            value = getattr(self, spec.attr)
            if spec.optional and value is None:
                continue
            items.append((spec.key, value))
        return items


def register(kind: str) -> Callable[[type[M]], type[M]]:
    """Class decorator: register a dataclass element under ``kind``."""

    def decorator(cls: type[M]) -> type[M]:
        regular: list[FieldSpec] = []
        optional: list[FieldSpec] = []
        for f in fields(cls):  # type: ignore[arg-type]
            meta = f.metadata.get("cq")
            if meta is None:
                continue
            spec = FieldSpec(
                key=meta["key"], attr=f.name, type=meta["type"], optional=meta["optional"]
            )
            (optional if spec.optional else regular).append(spec)
        cls.kind = kind
        cls.cq_fields = tuple(regular + optional)
        MEDIA_TYPES[kind] = cls
        logger.debug("Registered media kind %s -> %s", kind, cls.__name__)
        return cls

    return decorator


def media_class(kind: str) -> type[Media] | None:
    """Look up the element class registered for ``kind``."""
    return MEDIA_TYPES.get(kind)


@dataclass
class NetResource:
    """Modifier for elements that may reference a network resource."""

    # CACHE_ENABLED / CACHE_DISABLED; None when the element is not a network resource
    cache: int | None = cq_field("cache", None, int, optional=True, kw_only=True)

    def enable_cache(self) -> None:
        self.cache = CACHE_ENABLED

    def disable_cache(self) -> None:
        self.cache = CACHE_DISABLED


@register("text")
@dataclass
class Text(Media):
    """Plain text."""

    text: str = cq_field("text", "")


@register("at")
@dataclass
class At(Media):
    """Mention (@) of a user."""

    # QQ number as a string, or "all"
    qq: str = cq_field("qq", "")


@register("face")
@dataclass
class Face(Media):
    """QQ face (classic faces are 1-170, newer ones above 170)."""

    face_id: int = cq_field("id", 0)

    @classmethod
    def from_name(cls, name: str) -> "Face":
        """Build a face from its display name, e.g. ``"微笑"`` or ``"/微笑"``.

        Raises:
            UnknownFaceError: If the name is not in the bundled face table
        """
        name = name.strip("/")
        try:
            return cls(face_id=FACE_IDS[name])
        except KeyError:
            raise UnknownFaceError(f"unknown face: {name}") from None

    def name(self) -> str:
        """Return the display name of this face.

        Raises:
            UnknownFaceError: If the id is unknown; ``err.fallback`` holds
                the id as a string
        """
        try:
            return FACE_NAMES[self.face_id]
        except KeyError:
            raise UnknownFaceError(
                f"unknown face: {self.face_id}", fallback=str(self.face_id)
            ) from None

    @property
    def display_name(self) -> str:
        return FACE_NAMES.get(self.face_id, str(self.face_id))


@register("emoji")
@dataclass
class Emoji(Media):
    # Unicode code point, decimal
    emoji_id: int = cq_field("id", 0)


@register("bface")
@dataclass
class Bface(Media):
    # Original (custom-made) sticker
    bface_id: int = cq_field("id", 0)


@register("sface")
@dataclass
class Sface(Media):
    # Small face
    sface_id: int = cq_field("id", 0)


@register("image")
@dataclass
class Image(NetResource, Media):
    """Image, referenced by file id, local path, URL or base64 payload."""

    file: str = cq_field("file", "")
    url: str = cq_field("url", "")


@register("record")
@dataclass
class Record(NetResource, Media):
    """Voice record."""

    file: str = cq_field("file", "")
    # Voice-changer effect
    magic: bool = cq_field("magic", False)
    url: str = cq_field("url", "")


@register("rps")
@dataclass
class Rps(Media):
    # ROCK / PAPER / SCISSORS
    type: int = cq_field("type", 0)


@register("dice")
@dataclass
class Dice(Media):
    # Dice value 1-6
    type: int = cq_field("type", 0)


@register("shake")
@dataclass
class Shake(Media):
    pass


@register("music")
@dataclass
class Music(Media):
    """Music share card.

    Built-in providers ("qq", "163", "xiami") only need ``music_id``; a
    custom card (``type="custom"``) uses the remaining fields.
    """

    type: str = cq_field("type", "")
    music_id: str = cq_field("id", "")
    # Link opened on click
    url: str = cq_field("url", "")
    # Link to the audio
    audio: str = cq_field("audio", "")
    title: str = cq_field("title", "")
    content: str = cq_field("content", "")
    # Cover image link
    image: str = cq_field("image", "")

    def is_custom(self) -> bool:
        return self.type == "custom"


@register("share")
@dataclass
class Share(Media):
    url: str = cq_field("url", "")
    # Up to 12 characters
    title: str = cq_field("title", "")
    # Up to 30 characters
    content: str = cq_field("content", "")
    # Cover image link
    image: str = cq_field("image", "")


@register("location")
@dataclass
class Location(Media):
    lat: str = cq_field("lat", "")
    lon: str = cq_field("lon", "")
    title: str = cq_field("title", "")
    content: str = cq_field("content", "")


@register("show")
@dataclass
class Show(Media):
    show_id: int = cq_field("id", 0)


@register("sign")
@dataclass
class Sign(Media):
    location: str = cq_field("location", "")
    title: str = cq_field("title", "")
    image: str = cq_field("image", "")


@register("rich")
@dataclass
class Rich(Media):
    pass
