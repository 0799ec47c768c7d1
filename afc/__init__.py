"""Audio Fingerprint Codec (AFC) — decoder for compressed fingerprints.

API:
    import afc
    codewords, algorithm = afc.decode_fingerprint(data)
    codewords, algorithm = afc.decode_fingerprint(text, base64=True)

Both return ``(empty uint32 array, None)`` for malformed input. Use
``afc.FingerprintDecompressor`` to get the failure as an exception.
"""

__version__ = "0.1.0"

from .config import DecoderConfig
from .errors import (
    FingerprintError,
    MalformedStreamError,
    TooShortError,
    TruncatedError,
)
from .codec import (
    BitReader,
    DecodeStage,
    DecodedFingerprint,
    FingerprintDecompressor,
    b64decode_fingerprint,
    b64encode_fingerprint,
    decode_fingerprint,
    decompress_fingerprint,
)

__all__ = [
    "DecoderConfig",
    "FingerprintError",
    "TooShortError",
    "TruncatedError",
    "MalformedStreamError",
    "BitReader",
    "DecodeStage",
    "DecodedFingerprint",
    "FingerprintDecompressor",
    "decode_fingerprint",
    "decompress_fingerprint",
    "b64decode_fingerprint",
    "b64encode_fingerprint",
]
