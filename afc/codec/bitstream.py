"""Bit-granular reader over an in-memory byte buffer.

Compressed fingerprints pack their codes into bytes least-significant bit
first: the first code occupies the low bits of the first payload byte and
spills into the low bits of the next byte. ``bit_order='big'`` reads the
same bytes MSB-first, which is how most hand-written bit dumps look.

The reader mirrors the refill-and-drain behaviour of the writer that
produced the data: ``reset()`` throws away whatever is left of the byte
currently being drained, so the next read starts on a byte boundary.
Sections written with a flush in between are read back with a reset in
between.
"""

import numpy as np


class BitReader:
    """Read fixed-width unsigned groups from a byte buffer."""

    def __init__(self, data: bytes, bit_order: str = "little"):
        if bit_order not in ("little", "big"):
            raise ValueError(f"Unknown bit_order: {bit_order!r}")
        self._data = bytes(data)
        self._bits = np.unpackbits(
            np.frombuffer(self._data, dtype=np.uint8), bitorder=bit_order,
        )
        self._bit_order = bit_order
        self._pos = 0  # absolute bit offset of the next unread bit

    @property
    def position(self) -> int:
        """Absolute bit offset of the cursor."""
        return self._pos

    def available_bits(self) -> int:
        return len(self._bits) - self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._bits)

    def read_bit(self) -> int:
        if self._pos >= len(self._bits):
            raise EOFError("read past end of bit buffer")
        bit = int(self._bits[self._pos])
        self._pos += 1
        return bit

    def read(self, n_bits: int) -> int:
        """Consume ``n_bits`` and return them as an unsigned integer.

        With little bit order the first bit read is the least significant
        bit of the result; with big bit order it is the most significant.

        Raises:
            EOFError: fewer than ``n_bits`` bits remain. Nothing is consumed.
        """
        if n_bits < 0:
            raise ValueError(f"n_bits must be non-negative, got {n_bits}")
        if n_bits > self.available_bits():
            raise EOFError(
                f"requested {n_bits} bits, only {self.available_bits()} available"
            )
        chunk = self._bits[self._pos:self._pos + n_bits]
        self._pos += n_bits
        value = 0
        if self._bit_order == "little":
            for i, bit in enumerate(chunk):
                value |= int(bit) << i
        else:
            for bit in chunk:
                value = (value << 1) | int(bit)
        return value

    def skip_bytes(self, n_bytes: int):
        """Advance the cursor by whole bytes, clamped to the buffer end."""
        self._pos = min(self._pos + 8 * n_bytes, len(self._bits))

    def reset(self):
        """Drop the rest of a partially consumed byte.

        A no-op when the cursor already sits on a byte boundary.
        """
        self._pos = min(-(-self._pos // 8) * 8, len(self._bits))
