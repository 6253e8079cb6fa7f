"""Line segment between two points in 3D space."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import BinaryIO

import numpy as np

from ._config import CodecParams
from ._format import NumberFormatter, format_components
from .utils._codec import decode_floats, encode_floats, read_floats, write_floats
from .utils._float_bits import as_vec3, bits_equal, mix_hash, to_float32

FIELD_COUNT = 6


@dataclass(eq=False)
class LineSegment:
    """An undirected segment between endpoints ``a`` and ``b``.

    All fields hold binary32 values. A zero-length segment (a == b) is valid.
    Equality and hashing compare bit patterns, so NaN equals NaN and
    +0.0 differs from -0.0.
    """

    a_x: float = 0.0
    a_y: float = 0.0
    a_z: float = 0.0
    b_x: float = 0.0
    b_y: float = 0.0
    b_z: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            setattr(self, f.name, to_float32(getattr(self, f.name)))

    @classmethod
    def from_points(cls, a, b) -> "LineSegment":
        """Create a segment from two 3-element array-likes."""
        a = as_vec3(a, "a")
        b = as_vec3(b, "b")
        return cls(a[0], a[1], a[2], b[0], b[1], b[2])

    @classmethod
    def copy_of(cls, source: "LineSegment") -> "LineSegment":
        """Field-wise copy of ``source``.

        The JVM library this mirrors writes ``source.b_x`` into ``a_x`` and
        leaves ``b_x`` at zero. Here every field is copied to its own slot.
        """
        return cls(*source.as_tuple())

    def copy(self) -> "LineSegment":
        return type(self).copy_of(self)

    __copy__ = copy

    @property
    def a(self) -> np.ndarray:
        """First endpoint as a float32 array."""
        return np.array([self.a_x, self.a_y, self.a_z], dtype=np.float32)

    @property
    def b(self) -> np.ndarray:
        """Second endpoint as a float32 array."""
        return np.array([self.b_x, self.b_y, self.b_z], dtype=np.float32)

    def as_tuple(self) -> tuple[float, ...]:
        return (self.a_x, self.a_y, self.a_z, self.b_x, self.b_y, self.b_z)

    def as_array(self) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=np.float32)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return bits_equal(self.as_tuple(), other.as_tuple())

    def hash_code(self) -> int:
        """Signed 32-bit hash mixing a_x, a_y, a_z, b_x, b_y, b_z in order."""
        return mix_hash(self.as_tuple())

    def __hash__(self) -> int:
        return self.hash_code()

    def to_string(self, formatter: NumberFormatter | None = None) -> str:
        """Render as ``(aX aY aZ) - (bX bY bZ)``."""
        ax, ay, az, bx, by, bz = format_components(self.as_tuple(), formatter)
        return f"({ax} {ay} {az}) - ({bx} {by} {bz})"

    def __str__(self) -> str:
        return self.to_string()

    def to_bytes(self, params: CodecParams | None = None) -> bytes:
        """Encode as six consecutive binary32 values (24 bytes)."""
        return encode_floats(self.as_tuple(), params)

    @classmethod
    def from_bytes(cls, data: bytes, params: CodecParams | None = None) -> "LineSegment":
        """Decode a segment from exactly 24 bytes.

        Raises:
            DecodeError: If ``data`` has the wrong length.
        """
        return cls(*decode_floats(data, FIELD_COUNT, params))

    def write_to(self, stream: BinaryIO, params: CodecParams | None = None) -> None:
        write_floats(stream, self.as_tuple(), params)

    def read_from(self, stream: BinaryIO, params: CodecParams | None = None) -> "LineSegment":
        """Overwrite this segment's fields with a record read from ``stream``.

        Fields are only assigned once the full record has been read, so a
        truncated stream leaves the receiver unchanged.

        Raises:
            DecodeError: If the stream ends before 24 bytes are read.
        """
        (
            self.a_x,
            self.a_y,
            self.a_z,
            self.b_x,
            self.b_y,
            self.b_z,
        ) = read_floats(stream, FIELD_COUNT, params)
        return self
