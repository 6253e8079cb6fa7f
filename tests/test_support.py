"""Tests for formatting, configuration, bit helpers and the float codec."""

from __future__ import annotations

import io
import sys

import numpy as np
import pytest

from geomvalue import (
    ByteOrderPreset,
    CodecParams,
    DecodeError,
    FormatParams,
    format_number,
    scientific_formatter,
)
from geomvalue.utils._codec import decode_floats, encode_floats, read_floats, write_floats
from geomvalue.utils._float_bits import bits_equal, float_to_int_bits, mix_hash, to_float32


class TestScientificFormatter:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.0, "1.000E0"),
            (0.0, "0.000E0"),
            (-0.0015, "-1.500E-3"),
            (12346.0, "1.235E4"),
            (2.5e-20, "2.500E-20"),
        ],
    )
    def test_default_decimals(self, value: float, expected: str):
        assert scientific_formatter()(value) == expected

    def test_decimals(self):
        assert scientific_formatter(1)(1.0) == "1.0E0"
        assert FormatParams(decimals=0).formatter()(300.0) == "3E2"

    def test_negative_decimals_rejected_on_construction(self):
        with pytest.raises(ValueError, match="decimals"):
            FormatParams(decimals=-1)

    def test_non_finite_bypasses_formatter(self):
        def fail(_: float) -> str:
            raise AssertionError("formatter called")

        assert format_number(float("nan"), fail) == "NaN"
        assert format_number(float("inf"), fail) == "+Inf"
        assert format_number(float("-inf"), fail) == "-Inf"


class TestCodecParams:
    def test_default_is_big_endian(self):
        assert CodecParams().dtype == np.dtype(">f4")

    def test_presets(self):
        assert CodecParams.from_preset(ByteOrderPreset.JAVA).byte_order == "big"
        assert CodecParams.from_preset(ByteOrderPreset.NATIVE).byte_order == sys.byteorder

    def test_unknown_byte_order_rejected_on_construction(self):
        with pytest.raises(ValueError, match="byte_order"):
            CodecParams(byte_order="middle")


class TestFloatBits:
    def test_known_patterns(self, reference_bits):
        assert float_to_int_bits(1.0) == 0x3F800000
        assert float_to_int_bits(-0.0) == -(2**31)
        assert float_to_int_bits(float("nan")) == 0x7FC00000
        for v in (0.5, -3.75, 1e38, float("inf")):
            assert float_to_int_bits(v) == reference_bits(v)

    def test_bits_equal(self):
        assert bits_equal([float("nan")], [float("nan")])
        assert not bits_equal([0.0], [-0.0])
        assert not bits_equal([1.0], [1.0, 1.0])

    def test_mix_hash_wraps_to_int32(self, reference_hash):
        values = [3.4e38] * 8
        assert mix_hash(values) == reference_hash(values)
        assert mix_hash([]) == 1

    @pytest.mark.filterwarnings("error")
    def test_to_float32(self):
        assert to_float32(1e-50) == 0.0
        assert to_float32(1e39) == float("inf")


class TestFloatCodec:
    def test_encode_big_endian(self):
        assert encode_floats([1.0, -2.0]) == b"\x3f\x80\x00\x00\xc0\x00\x00\x00"

    def test_nan_is_written_canonical(self):
        signalling = decode_floats(bytes.fromhex("7fa00001"), 1)
        assert encode_floats(signalling) == bytes.fromhex("7fc00000")
        assert encode_floats([float("nan")], CodecParams(byte_order="little")) == bytes.fromhex(
            "0000c07f"
        )

    @pytest.mark.filterwarnings("error")
    def test_encode_overflow_without_warning(self):
        assert encode_floats([1e39]) == bytes.fromhex("7f800000")

    def test_decode_exact_length(self):
        assert decode_floats(b"\x3f\x80\x00\x00", 1) == (1.0,)
        with pytest.raises(DecodeError):
            decode_floats(b"\x3f\x80\x00", 1)

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_floats(b"", 2)

    def test_stream_reads_across_chunks(self):
        class Trickle(io.RawIOBase):
            def __init__(self, data: bytes):
                self._data = data

            def readable(self) -> bool:
                return True

            def read(self, n: int = -1) -> bytes:
                chunk, self._data = self._data[:1], self._data[1:]
                return chunk

        data = encode_floats([1.0, 2.0, 3.0])
        assert read_floats(Trickle(data), 3) == (1.0, 2.0, 3.0)

    def test_short_stream(self):
        buf = io.BytesIO()
        write_floats(buf, [1.0])
        buf.seek(0)
        with pytest.raises(DecodeError):
            read_floats(buf, 2)
