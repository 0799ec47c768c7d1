"""Compressed audio fingerprint decoder.

A fingerprint is a sequence of uint32 codewords where neighbours usually
differ in a handful of bits. The compressed form exploits that:
  - Each codeword is XORed with its predecessor (the first is kept as-is)
  - The set bits of the XOR are listed as gaps between bit positions
  - Gaps are 3-bit normal codes; 0 ends a codeword, 7 means "7 plus the
    next 5-bit exception code"

Layout:
    byte 0      algorithm id (opaque, passed through)
    bytes 1-3   number of codewords, big-endian uint24
    bytes 4..   normal codes, zero-padded to a byte boundary,
                then exception codes in the order of their normal codes

Example (one codeword, value 1):
    00 00 00 01 01  ->  codes [1, 0]  ->  bit 0 set  ->  [1]
"""

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..config import DecoderConfig
from ..errors import (
    FingerprintError,
    MalformedStreamError,
    TooShortError,
    TruncatedError,
)
from .bitstream import BitReader

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = DecoderConfig()


class DecodeStage(enum.Enum):
    PARSING_HEADER = "parsing_header"
    READING_NORMAL_CODES = "reading_normal_codes"
    READING_EXCEPTION_CODES = "reading_exception_codes"
    RECONSTRUCTING = "reconstructing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class DecodedFingerprint:
    """Result of a successful decode."""
    algorithm: int
    codewords: np.ndarray  # (n,) uint32

    def __len__(self) -> int:
        return len(self.codewords)


def parse_header(data: bytes, config: DecoderConfig = _DEFAULT_CONFIG) -> Tuple[int, int]:
    """Return ``(algorithm, declared_count)`` from the fixed header.

    Raises:
        TooShortError: ``data`` is shorter than the header.
    """
    if len(data) < config.header_size:
        raise TooShortError(
            f"Invalid fingerprint (shorter than {config.header_size} bytes)",
            DecodeStage.PARSING_HEADER,
        )
    algorithm = data[0]
    count = int.from_bytes(data[1:config.header_size], "big")
    return algorithm, count


def read_normal_codes(
    reader: BitReader,
    count: int,
    config: DecoderConfig = _DEFAULT_CONFIG,
) -> List[int]:
    """Read normal codes until ``count`` zero terminators have been seen.

    Raises:
        MalformedStreamError: the buffer runs out first.
    """
    codes = []
    terminators = 0
    while terminators < count:
        if reader.available_bits() < config.normal_bits:
            raise MalformedStreamError(
                f"Invalid fingerprint (found {terminators} of {count} "
                f"codewords before end of data)",
                DecodeStage.READING_NORMAL_CODES,
            )
        code = reader.read(config.normal_bits)
        if code == 0:
            terminators += 1
        codes.append(code)
    return codes


def read_exception_codes(
    reader: BitReader,
    codes: List[int],
    config: DecoderConfig = _DEFAULT_CONFIG,
) -> List[int]:
    """Widen every saturated normal code in place and return ``codes``.

    Raises:
        TruncatedError: an exception code is owed but the buffer is exhausted.
    """
    for i, code in enumerate(codes):
        if code != config.max_normal_value:
            continue
        if reader.available_bits() < config.exception_bits:
            raise TruncatedError(
                "Invalid fingerprint (reached EOF while reading exception bits)",
                DecodeStage.READING_EXCEPTION_CODES,
            )
        codes[i] = code + reader.read(config.exception_bits)
    return codes


def unpack_codes(
    codes: List[int],
    count: int,
    config: DecoderConfig = _DEFAULT_CONFIG,
) -> np.ndarray:
    """Rebuild codewords from resolved position codes.

    Each segment (codes up to a 0) lists 1-based gaps between the set bits
    of ``codeword[i] ^ codeword[i - 1]``.

    Raises:
        MalformedStreamError: a bit position exceeds the codeword width, or
            the codes do not describe exactly ``count`` codewords.
    """
    result = np.zeros(count, dtype=np.uint32)
    filled = 0
    value = 0
    last_position = 0
    for code in codes:
        if code == 0:
            if filled >= count:
                raise MalformedStreamError(
                    f"Invalid fingerprint (more than {count} codewords)",
                    DecodeStage.RECONSTRUCTING,
                )
            result[filled] = value ^ int(result[filled - 1]) if filled > 0 else value
            filled += 1
            value = 0
            last_position = 0
            continue
        position = last_position + code
        if position > config.max_bit_position:
            raise MalformedStreamError(
                f"Invalid fingerprint (bit position {position} in codeword "
                f"{filled} exceeds {config.max_bit_position})",
                DecodeStage.RECONSTRUCTING,
            )
        value |= 1 << (position - 1)
        last_position = position

    if filled != count or last_position:
        raise MalformedStreamError(
            f"Invalid fingerprint (decoded {filled} of {count} codewords)",
            DecodeStage.RECONSTRUCTING,
        )
    return result


class FingerprintDecompressor:
    """Decode compressed fingerprints, raising on malformed input.

    Usage:
        decompressor = FingerprintDecompressor()
        fp = decompressor.decompress(data)
        fp.algorithm, fp.codewords

    ``stage`` holds the last stage reached by the most recent call, which is
    ``DecodeStage.DONE`` or ``DecodeStage.FAILED`` once the call returns.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or _DEFAULT_CONFIG
        self.stage: Optional[DecodeStage] = None

    def decompress(self, data: bytes) -> DecodedFingerprint:
        """Decode ``data`` into a DecodedFingerprint.

        Raises:
            TooShortError: fewer bytes than the header.
            TruncatedError: payload cannot hold the declared codewords, or
                ends while an exception code is owed.
            MalformedStreamError: payload does not describe valid codewords.
            TypeError: ``data`` is text rather than bytes.
        """
        if isinstance(data, str):
            raise TypeError("compressed fingerprints must be bytes, not str")
        config = self.config
        try:
            self.stage = DecodeStage.PARSING_HEADER
            algorithm, count = parse_header(data, config)

            reader = BitReader(data, bit_order=config.bit_order)
            reader.skip_bytes(config.header_size)
            if reader.available_bits() < count * config.normal_bits:
                raise TruncatedError(
                    f"Invalid fingerprint (too short: {reader.available_bits()} "
                    f"payload bits for {count} codewords)",
                    DecodeStage.PARSING_HEADER,
                )

            self.stage = DecodeStage.READING_NORMAL_CODES
            reader.reset()
            codes = read_normal_codes(reader, count, config)

            self.stage = DecodeStage.READING_EXCEPTION_CODES
            reader.reset()
            read_exception_codes(reader, codes, config)

            self.stage = DecodeStage.RECONSTRUCTING
            codewords = unpack_codes(codes, count, config)
        except FingerprintError as exc:
            if exc.stage is None:
                exc.stage = self.stage
            self.stage = DecodeStage.FAILED
            raise

        self.stage = DecodeStage.DONE
        return DecodedFingerprint(algorithm=algorithm, codewords=codewords)


def decompress_fingerprint(
    data: bytes,
    config: Optional[DecoderConfig] = None,
) -> Tuple[np.ndarray, Optional[int]]:
    """Decode ``data``, collapsing decode failures to an empty result.

    Args:
        data: Compressed fingerprint bytes.
        config: Bit layout; defaults to the standard layout.

    Returns:
        ``(codewords, algorithm)`` on success, where codewords is a uint32
        array. ``(empty uint32 array, None)`` when ``data`` is not a valid
        compressed fingerprint.

    Raises:
        TypeError: ``data`` is text rather than bytes.
    """
    try:
        fp = FingerprintDecompressor(config).decompress(data)
    except FingerprintError as exc:
        logger.debug("Fingerprint decode failed at %s: %s",
                     exc.stage.value if exc.stage else "unknown", exc)
        return np.array([], dtype=np.uint32), None
    return fp.codewords, fp.algorithm
