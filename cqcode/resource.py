"""Helpers for building image/record elements from files, bytes and URLs."""

import base64
from pathlib import Path
from typing import IO

from cqcode.media import CACHE_ENABLED, Image, Record

FileSource = str | Path | bytes | bytearray | IO[bytes]


def file_base64(source: FileSource) -> str:
    """Encode a file as a ``base64://`` reference.

    Args:
        source: Path of a local file, raw bytes, or a binary file object

    Raises:
        TypeError: If ``source`` is none of the accepted types
        OSError: If the file cannot be read
    """
    if isinstance(source, (str, Path)):
        data = Path(source).read_bytes()
    elif isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    elif hasattr(source, "read"):
        data = source.read()
    else:
        raise TypeError(f"bad file type: {type(source).__name__}")
    return "base64://" + base64.b64encode(data).decode("ascii")


def file_local(path: str | Path) -> str:
    """Reference a file on the CQHTTP host by path."""
    return f"file://{path}"


def image_base64(source: FileSource) -> Image:
    return Image(file=file_base64(source))


def record_base64(source: FileSource, magic: bool = False) -> Record:
    return Record(file=file_base64(source), magic=magic)


def image_local(path: str | Path) -> Image:
    return Image(file=file_local(path))


def record_local(path: str | Path, magic: bool = False) -> Record:
    return Record(file=file_local(path), magic=magic)


def image_web(url: str) -> Image:
    """Image downloaded by CQHTTP from ``url``; caching is enabled."""
    return Image(file=str(url), cache=CACHE_ENABLED)


def record_web(url: str, magic: bool = False) -> Record:
    """Record downloaded by CQHTTP from ``url``; caching is enabled."""
    return Record(file=str(url), magic=magic, cache=CACHE_ENABLED)
