"""Escaping rules of the CQ code grammar.

Plain text protects ``&``, ``[`` and ``]``; values inside a ``[CQ:...]``
marker additionally protect ``,`` (the field separator). ``&`` is always
escaped first and unescaped last, so already-escaped input is never
double-escaped and decoded content can never form a new marker.

Both decoders accept ``&#44;``: CQHTTP emits it in plain text as well.
"""

import json
from typing import Any

_TEXT_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("[", "&#91;"),
    ("]", "&#93;"),
)

_VALUE_ESCAPES: tuple[tuple[str, str], ...] = _TEXT_ESCAPES + ((",", "&#44;"),)


def encode_text(text: str) -> str:
    """Escape a plain-text run."""
    for raw, escaped in _TEXT_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def decode_text(text: str) -> str:
    """Unescape a plain-text run."""
    for raw, escaped in reversed(_VALUE_ESCAPES):
        text = text.replace(escaped, raw)
    return text


def encode_value(value: str) -> str:
    """Escape a field value inside a CQ code."""
    for raw, escaped in _VALUE_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def decode_value(value: str) -> str:
    """Unescape a field value inside a CQ code."""
    for raw, escaped in reversed(_VALUE_ESCAPES):
        value = value.replace(escaped, raw)
    return value


def format_value(value: Any) -> str:
    """Render a field value the way it appears in a CQ code (before escaping)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        # Nested values of array-format segments (e.g. forward nodes)
        return json.dumps(value, ensure_ascii=False)
    return str(value)
