"""Tests for command detection and argument splitting."""

from cqcode.command import CommandConfig, is_command, parse_command
from cqcode.media import Emoji, Face, Music
from cqcode.message import Message, parse_message

STRICT = CommandConfig(strict=True)


def test_is_command_loose() -> None:
    assert is_command("hello")
    assert not is_command("")


def test_is_command_strict() -> None:
    assert is_command("/hello", STRICT)
    assert not is_command("hello", STRICT)
    assert not is_command("   ", STRICT)
    assert is_command("!hello", CommandConfig(strict=True, prefix="!"))


def test_quoted_arguments_and_marker() -> None:
    cmd, args = parse_command("/cmd 'a b' \"c d\" [CQ:face,id=5]", STRICT)
    assert cmd == "cmd"
    assert args == ["a b", "c d", "[CQ:face,id=5]"]


def test_strict_without_prefix() -> None:
    assert parse_command("cmd a b", STRICT) == ("", [])


def test_loose_mode_keeps_prefix() -> None:
    assert parse_command("/cmd a") == ("/cmd", ["a"])


def test_empty_input() -> None:
    assert parse_command("") == ("", [])
    assert parse_command("   \n") == ("", [])


def test_escaped_quotes_and_backslashes() -> None:
    text = "/say \"he said \\\"hi\\\"\" 'it\\'s' back\\\\slash"
    assert parse_command(text, STRICT) == ("say", ['he said "hi"', "it's", "back\\slash"])


def test_mixed_message() -> None:
    text2 = " arg1 'a \\'r \ng 2' \"a \\\"r \\\\\\\"g 3\\\\\" arg4\nargemoji"
    message = Message.of(
        "/",
        Face(face_id=170),
        text2,
        Emoji(emoji_id=10086),
        " arg5",
        Music(content="Alice\nLove\nBob"),
    )

    cmd, args = message.command(STRICT)

    assert cmd == "[CQ:face,id=170]"
    assert args == [
        "arg1",
        "a 'r \ng 2",
        'a "r \\"g 3\\',
        "arg4",
        "argemoji[CQ:emoji,id=10086]",
        "arg5[CQ:music,type=,id=,url=,audio=,title=,content=Alice\nLove\nBob,image=]",
    ]
    assert parse_message(cmd) == [Face(face_id=170)]
