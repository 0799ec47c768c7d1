"""AFC codec subpackage.

Bit-level reading lives in ``bitstream``; the fingerprint format in
``fingerprint``; the base64 text form in ``encoding``.
"""

from .bitstream import BitReader
from .fingerprint import (
    DecodeStage,
    DecodedFingerprint,
    FingerprintDecompressor,
    decompress_fingerprint,
    parse_header,
    read_exception_codes,
    read_normal_codes,
    unpack_codes,
)
from .encoding import b64decode_fingerprint, b64encode_fingerprint, decode_fingerprint

__all__ = [
    "BitReader",
    "DecodeStage",
    "DecodedFingerprint",
    "FingerprintDecompressor",
    "decompress_fingerprint",
    "decode_fingerprint",
    "b64decode_fingerprint",
    "b64encode_fingerprint",
    "parse_header",
    "read_normal_codes",
    "read_exception_codes",
    "unpack_codes",
]
