"""Tests for building image/record elements from files and URLs."""

import io
from pathlib import Path

import pytest

from cqcode.media import CACHE_ENABLED, Image, Record
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


def test_file_base64_sources(tmp_path: Path) -> None:
    path = tmp_path / "a.bin"
    path.write_bytes(b"hello")

    assert file_base64(b"hello") == "base64://aGVsbG8="
    assert file_base64(path) == "base64://aGVsbG8="
    assert file_base64(str(path)) == "base64://aGVsbG8="
    assert file_base64(io.BytesIO(b"hello")) == "base64://aGVsbG8="


def test_file_base64_bad_type() -> None:
    with pytest.raises(TypeError, match="bad file type"):
        file_base64(42)  # type: ignore[arg-type]


def test_file_base64_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        file_base64(tmp_path / "missing.jpg")


def test_local_references() -> None:
    assert file_local("/tmp/a.jpg") == "file:///tmp/a.jpg"
    assert image_local("/tmp/a.jpg") == Image(file="file:///tmp/a.jpg")
    assert record_local("/tmp/a.amr", magic=True) == Record(file="file:///tmp/a.amr", magic=True)


def test_base64_elements() -> None:
    assert image_base64(b"hello") == Image(file="base64://aGVsbG8=")
    assert record_base64(b"hello").file == "base64://aGVsbG8="


def test_web_elements_enable_cache() -> None:
    image = image_web("https://img.example.com/a.jpg")
    assert image == Image(file="https://img.example.com/a.jpg", cache=CACHE_ENABLED)
    assert image.cq_items()[-1] == ("cache", 1)
    assert record_web("https://a.com/b.amr").cache == CACHE_ENABLED
