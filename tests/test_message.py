"""Tests for whole-message decoding and encoding."""

import pytest

from cqcode.command import CommandConfig
from cqcode.errors import CQCodeError
from cqcode.media import (
    CACHE_ENABLED,
    MEDIA_TYPES,
    At,
    Bface,
    Dice,
    Emoji,
    Face,
    Image,
    Location,
    Media,
    Music,
    Record,
    Rich,
    Rps,
    Sface,
    Shake,
    Share,
    Show,
    Sign,
    Text,
)
from cqcode.message import Message, parse_message, parse_message_segments
from cqcode.segment import Segment


def test_decode_mixed_string() -> None:
    raw = (
        "&#91;he&#44;ym[CQ:at,qq=123&#44;456][CQ:face,id=14] \n"
        "See this awesome image, [CQ:image,file=1.jpg] Isn't it cool? [CQ:shake]\n"
    )
    assert parse_message(raw) == [
        Text(text="[he,ym"),
        At(qq="123,456"),
        Face(face_id=14),
        Text(text=" \nSee this awesome image, "),
        Image(file="1.jpg"),
        Text(text=" Isn't it cool? "),
        Shake(),
        Text(text="\n"),
    ]


def test_text_around_marker_round_trips() -> None:
    message = parse_message("A[CQ:shake]B")
    assert message == [Text(text="A"), Shake(), Text(text="B")]
    assert message.cq_string() == "A[CQ:shake]B"


def test_unknown_kind_round_trips() -> None:
    raw = "x[CQ:mystery,z=1,a=&#91;&#93;]y"
    message = parse_message(raw)
    assert message[1] == Segment(type="mystery", data={"z": "1", "a": "[]"})
    assert message.cq_string() == raw


# At least one populated sample of every registered kind
SAMPLES = [
    Text(text="a [b], c & d"),
    At(qq="all"),
    Face(face_id=170),
    Emoji(emoji_id=10086),
    Image(file="a.jpg"),
    Image(file="https://example.com/a.jpg", url="https://example.com/a.jpg", cache=0),
    Record(file="/data/[,]&.amr", magic=True),
    Record(file="http://a.com/b.amr", cache=CACHE_ENABLED),
    Bface(bface_id=12),
    Sface(sface_id=7),
    Show(show_id=40000),
    Sign(location="Beijing", title="check in", image="http://a.com/c.jpg"),
    Shake(),
    Rich(),
    Rps(type=2),
    Dice(type=6),
    Music(type="custom", url="u", audio="a", title="t", content="Alice\nLove\nBob"),
    Share(url="http://a.com/?x=1&y=2", title="a,b"),
    Location(lat="39.9", lon="116.3", title="t"),
]


def test_samples_cover_every_kind() -> None:
    assert {media.kind for media in SAMPLES} == set(MEDIA_TYPES)


@pytest.mark.parametrize("media", SAMPLES, ids=lambda media: type(media).__name__)
def test_element_survives_both_encodings(media: Media) -> None:
    message = Message([media])
    assert parse_message(message.cq_string()) == [media]
    assert parse_message(message.to_payload("array")) == [media]


def test_decode_array() -> None:
    raw = [
        {"type": "text", "data": {"text": "hi "}},
        {"type": "at", "data": {"qq": 10001}},
        {"type": "mystery", "data": {"a": "1"}},
    ]
    assert parse_message(raw) == [
        Text(text="hi "),
        At(qq="10001"),
        Segment(type="mystery", data={"a": "1"}),
    ]


def test_malformed_array_items_are_skipped() -> None:
    raw = [{"type": "text", "data": {"text": "hi"}}, "junk", {"data": {}}, {"type": "shake"}]
    assert parse_message(raw) == [Text(text="hi"), Shake()]


def test_undecodable_element_is_skipped() -> None:
    assert parse_message("[CQ:face,id=abc]ok") == [Text(text="ok")]


def test_parse_message_payload_types() -> None:
    assert parse_message(None) == []
    assert parse_message("") == []
    with pytest.raises(CQCodeError):
        parse_message_segments(42)


def test_to_payload() -> None:
    message = Message.of("a[", Face(face_id=14))
    assert message.to_payload("string") == "a&#91;[CQ:face,id=14]"
    assert message.to_payload("array") == [
        {"type": "text", "data": {"text": "a["}},
        {"type": "face", "data": {"id": 14}},
    ]
    with pytest.raises(ValueError):
        message.to_payload("xml")


def test_extract_plain_text() -> None:
    assert Message.of("a", Face(face_id=1), "b").extract_plain_text() == "ab"


def test_message_of_wraps_strings() -> None:
    assert Message.of("x", Shake()) == [Text(text="x"), Shake()]


def test_message_command() -> None:
    config = CommandConfig(strict=True)
    message = Message.of("/echo ", Face(face_id=5), " hi")
    assert message.is_command(config)
    assert message.command(config) == ("echo", ["[CQ:face,id=5]", "hi"])
    assert not Message.of("echo").is_command(config)
    assert not Message().is_command()


def test_mentions() -> None:
    message = parse_message("[CQ:at,qq=1234567890] hello [CQ:at,qq=10001]")
    assert message.mentions(1234567890)
    assert message.mentions("10001")
    assert not message.mentions(42)
    # A mention of everyone is not a mention of a specific account
    assert not parse_message("[CQ:at,qq=all] hi").mentions(1234567890)
    assert not Message.of("1234567890").mentions(1234567890)
