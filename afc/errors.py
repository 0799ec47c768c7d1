"""Exceptions raised while decoding compressed fingerprints.

All of them derive from ValueError so callers that already guard
``bytes -> value`` conversions keep working.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .codec.fingerprint import DecodeStage


class FingerprintError(ValueError):
    """Base class for invalid compressed fingerprints.

    Attributes:
        stage: The DecodeStage that was active when decoding failed,
            or None when the error was raised outside a decoder.
    """

    def __init__(self, message: str, stage: Optional["DecodeStage"] = None):
        super().__init__(message)
        self.stage = stage


class TooShortError(FingerprintError):
    """Buffer is smaller than the fixed header."""


class TruncatedError(FingerprintError):
    """Payload holds fewer bits than the header promises."""


class MalformedStreamError(FingerprintError):
    """Payload is long enough but does not describe valid codewords."""
