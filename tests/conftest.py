"""Pytest configuration and fixtures for geomvalue tests."""

from __future__ import annotations

import struct
from typing import Callable

import pytest

from geomvalue import LineSegment, Sphere


# =============================================================================
# REFERENCE VALUES
# =============================================================================

# Six distinct components so any swapped field shows up in assertions.
SEGMENT_FIELDS = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
SPHERE_FIELDS = (1.0, 2.0, 3.0, 5.0)

# Values that survive binary32 rounding unchanged, plus edge cases.
EXACT_SCALARS = (0.0, -0.0, 1.0, -2.5, 0.125, 1024.0, 3.4028234663852886e38)


def java_float_bits(value: float) -> int:
    """Reference floatToIntBits computed with struct, independent of numpy."""
    if value != value:
        return 0x7FC00000
    return struct.unpack(">i", struct.pack(">f", value))[0]


def java_hash(values) -> int:
    """Reference 31-multiplier hash with signed 32-bit wraparound."""
    result = 1
    for v in values:
        result = (31 * result + java_float_bits(v)) & 0xFFFFFFFF
    return result - (1 << 32) if result >= (1 << 31) else result


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def segment() -> LineSegment:
    """Segment with six distinct components."""
    return LineSegment(*SEGMENT_FIELDS)


@pytest.fixture
def sphere() -> Sphere:
    """Sphere centered at (1, 2, 3) with radius 5."""
    return Sphere(*SPHERE_FIELDS)


@pytest.fixture
def reference_hash() -> Callable:
    return java_hash


@pytest.fixture
def reference_bits() -> Callable:
    return java_float_bits
