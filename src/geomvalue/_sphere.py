"""Sphere value type."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import BinaryIO

import numpy as np

from ._config import CodecParams
from ._format import NumberFormatter, format_components
from .utils._codec import decode_floats, encode_floats, read_floats, write_floats
from .utils._float_bits import as_vec3, bits_equal, mix_hash, to_float32

FIELD_COUNT = 4


@dataclass(eq=False)
class Sphere:
    """A sphere defined by center and radius.

    The radius is not validated; zero and negative values are kept as given.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    r: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            setattr(self, f.name, to_float32(getattr(self, f.name)))

    @classmethod
    def from_center(cls, center, radius: float) -> "Sphere":
        """Create a sphere from a 3-element center and a radius."""
        c = as_vec3(center, "center")
        return cls(c[0], c[1], c[2], radius)

    @classmethod
    def copy_of(cls, source: "Sphere") -> "Sphere":
        return cls(source.x, source.y, source.z, source.r)

    def copy(self) -> "Sphere":
        return type(self).copy_of(self)

    __copy__ = copy

    @property
    def center(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.r)

    def as_array(self) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=np.float32)

    def translate(self, dx: float, dy: float, dz: float) -> "Sphere":
        """Move the center by (dx, dy, dz) in place and return self."""
        return self.translated(dx, dy, dz, dest=self)

    def translated(
        self, dx: float, dy: float, dz: float, dest: "Sphere | None" = None
    ) -> "Sphere":
        """Write ``center + (dx, dy, dz)`` into ``dest`` and return it.

        With ``dest=None`` a new sphere with this sphere's radius is
        returned and the receiver is left untouched. ``dest`` may be the
        receiver itself. The radius of ``dest`` is never changed.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            center = self.center + np.array([dx, dy, dz], dtype=np.float32)
        if dest is None:
            return Sphere(center[0], center[1], center[2], self.r)
        dest.x = float(center[0])
        dest.y = float(center[1])
        dest.z = float(center[2])
        return dest

    def translate_by(self, offset) -> "Sphere":
        """In-place translate by a 3-element array-like."""
        o = as_vec3(offset, "offset")
        return self.translate(o[0], o[1], o[2])

    def translated_by(self, offset, dest: "Sphere | None" = None) -> "Sphere":
        o = as_vec3(offset, "offset")
        return self.translated(o[0], o[1], o[2], dest=dest)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return bits_equal(self.as_tuple(), other.as_tuple())

    def hash_code(self) -> int:
        """Signed 32-bit hash. The radius is mixed first, then x, y, z."""
        return mix_hash((self.r, self.x, self.y, self.z))

    def __hash__(self) -> int:
        return self.hash_code()

    def to_string(self, formatter: NumberFormatter | None = None) -> str:
        """Render as ``[x y z r]``."""
        return "[" + " ".join(format_components(self.as_tuple(), formatter)) + "]"

    def __str__(self) -> str:
        return self.to_string()

    def to_bytes(self, params: CodecParams | None = None) -> bytes:
        """Encode as x, y, z, r binary32 values (16 bytes)."""
        return encode_floats(self.as_tuple(), params)

    @classmethod
    def from_bytes(cls, data: bytes, params: CodecParams | None = None) -> "Sphere":
        return cls(*decode_floats(data, FIELD_COUNT, params))

    def write_to(self, stream: BinaryIO, params: CodecParams | None = None) -> None:
        write_floats(stream, self.as_tuple(), params)

    def read_from(self, stream: BinaryIO, params: CodecParams | None = None) -> "Sphere":
        """Overwrite this sphere with a record read from ``stream``.

        Raises:
            DecodeError: If the stream ends before 16 bytes are read.
        """
        self.x, self.y, self.z, self.r = read_floats(stream, FIELD_COUNT, params)
        return self
