"""Tests for DecoderConfig."""

import dataclasses

import pytest

from afc.config import DecoderConfig


class TestDecoderConfig:

    def test_defaults(self):
        """Default layout is the standard fingerprint wire format."""
        config = DecoderConfig()
        assert config.header_size == 4
        assert config.normal_bits == 3
        assert config.exception_bits == 5
        assert config.bit_order == "little"
        assert config.max_bit_position == 32

    def test_derived_limits(self):
        config = DecoderConfig()
        assert config.max_normal_value == 7
        assert config.max_code_value == 38

    def test_big_bit_order(self):
        assert DecoderConfig(bit_order="big").bit_order == "big"

    def test_invalid_bit_order(self):
        with pytest.raises(ValueError, match="bit_order"):
            DecoderConfig(bit_order="native")

    def test_invalid_widths(self):
        with pytest.raises(ValueError):
            DecoderConfig(normal_bits=0)

    def test_frozen(self):
        config = DecoderConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.normal_bits = 4

    @pytest.mark.parametrize("header_size", [0, 3, 8])
    def test_header_size_fixed(self, header_size):
        """The header is always 1 byte id + 3 byte count."""
        with pytest.raises(ValueError, match="header_size"):
            DecoderConfig(header_size=header_size)

    @pytest.mark.parametrize("max_bit_position", [0, 33, 64])
    def test_max_bit_position_within_uint32(self, max_bit_position):
        with pytest.raises(ValueError, match="max_bit_position"):
            DecoderConfig(max_bit_position=max_bit_position)

    def test_narrower_codewords_allowed(self):
        assert DecoderConfig(max_bit_position=16).max_bit_position == 16
