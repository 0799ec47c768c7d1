"""Text form of compressed fingerprints.

Fingerprints are exchanged as URL-safe base64 ('-' and '_' instead of
'+' and '/') with the '=' padding stripped.
"""

import base64 as b64
import binascii
import logging
from typing import Optional, Tuple, Union

import numpy as np

from ..config import DecoderConfig
from ..errors import FingerprintError, MalformedStreamError
from .fingerprint import DecodeStage, decompress_fingerprint

logger = logging.getLogger(__name__)


def b64decode_fingerprint(encoded: Union[str, bytes]) -> bytes:
    """Decode the URL-safe, unpadded base64 form to raw compressed bytes.

    Raises:
        MalformedStreamError: ``encoded`` is not valid base64 text.
    """
    if isinstance(encoded, str):
        try:
            encoded = encoded.encode("ascii")
        except UnicodeEncodeError as exc:
            raise MalformedStreamError(
                "Invalid fingerprint (non-ASCII base64 text)",
                DecodeStage.PARSING_HEADER,
            ) from exc
    encoded = encoded.strip().rstrip(b"=")
    encoded += b"=" * (-len(encoded) % 4)
    try:
        return b64.b64decode(encoded, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise MalformedStreamError(
            f"Invalid fingerprint (bad base64: {exc})",
            DecodeStage.PARSING_HEADER,
        ) from exc


def b64encode_fingerprint(data: bytes) -> str:
    """Inverse of b64decode_fingerprint."""
    return b64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def decode_fingerprint(
    encoded: Union[str, bytes],
    base64: bool = False,
    config: Optional[DecoderConfig] = None,
) -> Tuple[np.ndarray, Optional[int]]:
    """Decode a compressed fingerprint, raw or base64 text.

    Args:
        encoded: Compressed bytes, or base64 text when ``base64`` is set.
        base64: Input is the URL-safe unpadded base64 form.
        config: Bit layout; defaults to the standard layout.

    Returns:
        ``(codewords, algorithm)``; ``(empty uint32 array, None)`` on failure.

    Raises:
        TypeError: ``encoded`` is text but ``base64`` is not set.
    """
    if base64:
        try:
            encoded = b64decode_fingerprint(encoded)
        except FingerprintError as exc:
            logger.debug("Fingerprint decode failed at %s: %s", exc.stage.value, exc)
            return np.array([], dtype=np.uint32), None
    elif isinstance(encoded, str):
        raise TypeError("raw fingerprints must be bytes; pass base64=True for text")
    return decompress_fingerprint(encoded, config)
