"""Command detection and shell-like argument splitting for CQ messages.

Works on the CQ string of a message, so media stay embedded in the
command and its arguments as CQ codes. Run ``parse_message`` on a token to
get typed elements back.

Quoting rules:
- ``'...'`` and ``"..."`` group words (and newlines) into one argument
- ``\\\\``, ``\\"`` and ``\\'`` are literal backslash / quote characters
- a CQ code glued to surrounding non-space text stays one argument
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger("cqcode.command")

# Escaped backslash/quotes are swapped for private-use characters while tokenizing
_ESCAPES: tuple[tuple[str, str, str], ...] = (
    ("\\\\", chr(0xE05C), "\\"),
    ('\\"', chr(0xE022), '"'),
    ("\\'", chr(0xE027), "'"),
)

_TOKEN_RE = re.compile(r"""'[\s\S]*?'|"[\s\S]*?"|\S*\[CQ:[\s\S]*?\]\S*|\S+""")


@dataclass(frozen=True)
class CommandConfig:
    """How messages are recognised as commands."""

    # When True, only messages starting with `prefix` are commands
    strict: bool = False
    # Command prefix, stripped from the command name in strict mode
    prefix: str = "/"


DEFAULT_COMMAND_CONFIG = CommandConfig()


def is_command(text: str, config: CommandConfig = DEFAULT_COMMAND_CONFIG) -> bool:
    """Return True if ``text`` should be treated as a command."""
    if not text:
        return False
    if config.strict and not text.startswith(config.prefix):
        return False
    return True


def _protect(text: str) -> str:
    for escaped, sentinel, _ in _ESCAPES:
        text = text.replace(escaped, sentinel)
    return text


def _restore(text: str) -> str:
    for _, sentinel, literal in reversed(_ESCAPES):
        text = text.replace(sentinel, literal)
    return text


def parse_command(
    text: str, config: CommandConfig = DEFAULT_COMMAND_CONFIG
) -> tuple[str, list[str]]:
    """Split a command string into ``(command, args)``.

    In strict mode the prefix is removed from the command, and a string not
    starting with the prefix yields ``("", [])``.

    Examples::

        >>> parse_command("/echo 'a b' c", CommandConfig(strict=True))
        ('echo', ['a b', 'c'])
    """
    tokens = _TOKEN_RE.findall(_protect(text))
    if not tokens:
        return "", []

    cmd = tokens[0]
    if config.strict:
        if not cmd.startswith(config.prefix):
            logger.debug("Not a command (missing prefix %r): %s", config.prefix, text[:100])
            return "", []
        cmd = cmd[len(config.prefix) :]

    args = [_restore(token.strip("'\"")) for token in tokens[1:]]
    return cmd, args
