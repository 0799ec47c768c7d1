"""Shared fixtures: a reference fingerprint encoder for round-trip tests."""

import numpy as np
import pytest


class _BitWriter:
    """Write fixed-width groups to a byte buffer, LSB-first or MSB-first."""

    def __init__(self, bit_order: str = "little"):
        self._bits = []
        self._bit_order = bit_order

    def write_bits(self, value: int, n_bits: int):
        if self._bit_order == "little":
            order = range(n_bits)
        else:
            order = range(n_bits - 1, -1, -1)
        for i in order:
            self._bits.append((value >> i) & 1)

    def flush(self) -> bytes:
        """Zero-pad to a byte boundary and return the bytes written so far."""
        self._bits.extend([0] * (-len(self._bits) % 8))
        if not self._bits:
            return b""
        packed = np.packbits(np.array(self._bits, dtype=np.uint8),
                             bitorder=self._bit_order)
        self._bits = []
        return packed.tobytes()


def encode_codes(codes, count, algorithm=0, bit_order="little"):
    """Pack already-resolved position codes into a compressed buffer."""
    writer = _BitWriter(bit_order)
    for code in codes:
        writer.write_bits(min(code, 7), 3)
    normal = writer.flush()
    for code in codes:
        if code >= 7:
            writer.write_bits(code - 7, 5)
    exceptions = writer.flush()
    return bytes([algorithm]) + count.to_bytes(3, "big") + normal + exceptions


def encode_fingerprint(codewords, algorithm=0, bit_order="little"):
    """Compress a uint32 sequence into the wire format."""
    codewords = [int(c) & 0xFFFFFFFF for c in codewords]
    codes = []
    prev = 0
    for i, word in enumerate(codewords):
        delta = word ^ prev if i > 0 else word
        last_position = 0
        position = 1
        while delta:
            if delta & 1:
                codes.append(position - last_position)
                last_position = position
            delta >>= 1
            position += 1
        codes.append(0)
        prev = word
    return encode_codes(codes, len(codewords), algorithm, bit_order)


@pytest.fixture
def encoder():
    return encode_fingerprint


@pytest.fixture
def code_encoder():
    return encode_codes


@pytest.fixture
def sample_fingerprint():
    """Fingerprint-like codewords: a random walk flipping a few bits per step."""
    rng = np.random.RandomState(42)
    words = [int(rng.randint(0, 2**32, dtype=np.uint64))]
    for _ in range(299):
        flips = rng.choice(32, size=rng.randint(0, 6), replace=False)
        mask = 0
        for bit in flips:
            mask |= 1 << int(bit)
        words.append(words[-1] ^ mask)
    return np.array(words, dtype=np.uint32)
