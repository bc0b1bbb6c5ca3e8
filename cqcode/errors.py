"""Error types raised by the CQ code codec."""

from typing import Any


class CQCodeError(Exception):
    """Base class for every codec error.

    Carries the partially decoded element (if any) so callers that accept
    best-effort results can still use it.
    """

    def __init__(self, message: str, media: Any = None) -> None:
        super().__init__(message)
        self.media = media


class InvalidCQCodeError(CQCodeError):
    """A string that is not a CQ code was decoded into a non-text element."""

    def __init__(self, message: str = "invalid cqcode", media: Any = None) -> None:
        super().__init__(message, media)


class WrongMediaTypeError(CQCodeError):
    """A segment was decoded into an element of a different kind.

    Fields whose names match are still copied into ``media``.
    """

    def __init__(self, message: str = "wrong media type", media: Any = None) -> None:
        super().__init__(message, media)


class UnknownFaceError(CQCodeError):
    """Face name or id is missing from the bundled face table."""

    def __init__(self, message: str = "unknown face", fallback: str = "") -> None:
        super().__init__(message)
        # Printable stand-in for an unknown face id (its decimal form)
        self.fallback = fallback
