"""Fixed-width binary32 record encoding.

A record is ``count`` consecutive binary32 values with no header or length
prefix. Decoding requires exactly ``4 * count`` bytes.
"""

from __future__ import annotations

from typing import BinaryIO, Iterable

import numpy as np
from loguru import logger

from .._config import CodecParams
from .._errors import DecodeError

FLOAT_SIZE = 4


def _params(params: CodecParams | None) -> CodecParams:
    return CodecParams() if params is None else params


def encode_floats(values: Iterable[float], params: CodecParams | None = None) -> bytes:
    """Encode values as consecutive binary32 values, with NaN canonicalized."""
    dtype = _params(params).dtype
    with np.errstate(over="ignore"):
        arr = np.asarray(list(values), dtype=np.float32)
    # DataOutput.writeFloat emits every NaN as 0x7fc00000.
    arr = np.where(np.isnan(arr), np.float32("nan"), arr).astype(np.float32)
    return arr.astype(dtype).tobytes()


def decode_floats(
    data: bytes, count: int, params: CodecParams | None = None
) -> tuple[float, ...]:
    """Decode exactly ``count`` binary32 values from ``data``.

    Raises:
        DecodeError: If ``data`` is not exactly ``4 * count`` bytes long.
    """
    dtype = _params(params).dtype
    expected = FLOAT_SIZE * count
    if len(data) != expected:
        logger.debug(f"Rejecting float record: expected {expected} bytes, got {len(data)}")
        raise DecodeError(
            f"Expected {expected} bytes for {count} floats, got {len(data)}"
        )
    arr = np.frombuffer(bytes(data), dtype=dtype, count=count)
    return tuple(float(v) for v in arr)


def write_floats(
    stream: BinaryIO, values: Iterable[float], params: CodecParams | None = None
) -> None:
    """Write values to a binary stream as one record."""
    stream.write(encode_floats(values, params))


def read_floats(
    stream: BinaryIO, count: int, params: CodecParams | None = None
) -> tuple[float, ...]:
    """Read one record of ``count`` binary32 values from a binary stream.

    Raises:
        DecodeError: If the stream ends before the record is complete.
    """
    expected = FLOAT_SIZE * count
    chunks = []
    remaining = expected
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) != expected:
        logger.debug(f"Short read: stream ended after {len(data)} of {expected} bytes")
        raise DecodeError(
            f"Stream ended after {len(data)} of {expected} bytes"
        )
    return decode_floats(data, count, params)
