"""Binary32 helpers shared by the value types."""

from __future__ import annotations

from typing import Iterable

import numpy as np

_CANONICAL_NAN_BITS = 0x7FC00000
_HASH_PRIME = 31


def to_float32(value) -> float:
    """Round a scalar to the nearest binary32 value, returned as a Python float."""
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def float_to_int_bits(value: float) -> int:
    """Signed 32-bit integer holding the binary32 bit pattern of ``value``.

    Every NaN collapses to the canonical quiet NaN, so two NaNs compare equal
    while +0.0 and -0.0 stay distinct.
    """
    with np.errstate(over="ignore"):
        f = np.float32(value)
    if np.isnan(f):
        return _CANONICAL_NAN_BITS
    return int(f.view(np.int32))


def bits_equal(a: Iterable[float], b: Iterable[float]) -> bool:
    """True iff both sequences have the same length and identical bit patterns."""
    a = tuple(a)
    b = tuple(b)
    if len(a) != len(b):
        return False
    return all(float_to_int_bits(x) == float_to_int_bits(y) for x, y in zip(a, b))


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def mix_hash(values: Iterable[float]) -> int:
    """Combine the bit patterns of ``values`` with the 31-multiplier scheme.

    Starts at 1 and wraps to a signed 32-bit integer after every step, so the
    result matches hash codes computed on the JVM for the same fields.
    """
    result = 1
    for v in values:
        result = _wrap_int32(_HASH_PRIME * result + float_to_int_bits(v))
    return result


def as_vec3(values, name: str = "vector") -> np.ndarray:
    """Convert an array-like to a float32 array of shape (3,)."""
    with np.errstate(over="ignore"):
        arr = np.asarray(values, dtype=np.float32).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(
            f"{name} must have exactly 3 components, got shape {np.shape(values)}"
        )
    return arr
