"""Central configuration for the audio fingerprint codec."""

from dataclasses import dataclass

_BIT_ORDERS = ("little", "big")


@dataclass(frozen=True)
class DecoderConfig:
    """Bit layout of a compressed fingerprint in one place."""

    # --- Header ---
    header_size: int = 4  # 1 byte algorithm id + 3 byte big-endian count

    # --- Payload ---
    normal_bits: int = 3  # width of a normal (position delta) code
    exception_bits: int = 5  # width of the supplement for a saturated normal code
    bit_order: str = "little"  # 'little' (LSB-first, wire format) or 'big'

    # --- Codewords ---
    max_bit_position: int = 32  # codewords are uint32

    def __post_init__(self):
        if self.bit_order not in _BIT_ORDERS:
            raise ValueError(
                f"Unknown bit_order: {self.bit_order!r}. Use 'little' or 'big'."
            )
        if self.normal_bits < 1 or self.exception_bits < 0:
            raise ValueError("normal_bits must be >= 1 and exception_bits >= 0")
        if self.header_size != 4:
            raise ValueError(
                f"header_size must be 4 (algorithm id + 24-bit count), got {self.header_size}"
            )
        if not 1 <= self.max_bit_position <= 32:
            raise ValueError(
                f"max_bit_position must be in 1..32, got {self.max_bit_position}"
            )

    @property
    def max_normal_value(self) -> int:
        return (1 << self.normal_bits) - 1

    @property
    def max_code_value(self) -> int:
        return self.max_normal_value + (1 << self.exception_bits) - 1
