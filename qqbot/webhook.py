"""Webhook (HTTP POST) event decoding with HMAC-SHA1 verification.

CQHTTP signs each post with the configured secret and sends the result in
the ``X-Signature`` header as ``sha1=<hex digest>``.
"""

import hashlib
import hmac
import json
import logging

from qqbot.models import Update

logger = logging.getLogger("qqbot.webhook")


class SignatureError(Exception):
    """Webhook body does not match its X-Signature header."""


def sign(secret: str, body: bytes) -> str:
    """Return the ``X-Signature`` value CQHTTP sends for ``body``."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha1).hexdigest()
    return f"sha1={digest}"


def verify_signature(secret: str, body: bytes, header: str | None) -> bool:
    """Check a webhook post against its ``X-Signature`` header.

    An empty secret means signing is disabled and every body verifies.
    """
    if not secret:
        return True
    if not header:
        return False
    return hmac.compare_digest(sign(secret, body), header.strip())


def parse_webhook(body: bytes, signature: str | None, secret: str = "") -> Update:
    """Verify and decode one webhook post.

    Raises:
        SignatureError: If the signature does not match
        ValueError: If the body is not a JSON object
    """
    if not verify_signature(secret, body, signature):
        logger.warning("Rejected webhook post with bad signature: %s", signature)
        raise SignatureError("bad X-Signature")
    event = json.loads(body)
    if not isinstance(event, dict):
        raise ValueError("webhook body is not a JSON object")
    return Update.from_event(event)
