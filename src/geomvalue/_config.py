"""Configuration for formatting and binary encoding."""

from __future__ import annotations

import sys
from enum import Enum

import jax_dataclasses as jdc
import numpy as np

from ._format import NumberFormatter, scientific_formatter

_BYTE_ORDER_CHARS = {"big": ">", "little": "<"}


class ByteOrderPreset(Enum):
    """Preset byte orders for the float record codec.

    JAVA: Big-endian. Matches ``DataOutput.writeFloat`` so records can be
          exchanged with the JVM math library these types mirror.

    NATIVE: Byte order of the running host.
    """

    JAVA = "java"
    NATIVE = "native"


@jdc.pytree_dataclass
class FormatParams:
    """Parameters for the default number formatter."""

    decimals: int = 3
    """Digits after the decimal point of the mantissa."""

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")

    def formatter(self) -> NumberFormatter:
        """Build the scientific formatter described by these params."""
        return scientific_formatter(self.decimals)


@jdc.pytree_dataclass
class CodecParams:
    """Parameters for encoding float records."""

    byte_order: str = "big"
    """Either 'big' or 'little'."""

    def __post_init__(self) -> None:
        if self.byte_order not in _BYTE_ORDER_CHARS:
            raise ValueError(
                f"byte_order must be 'big' or 'little', got '{self.byte_order}'"
            )

    @property
    def dtype(self) -> np.dtype:
        """Binary32 dtype in the configured byte order."""
        return np.dtype(_BYTE_ORDER_CHARS[self.byte_order] + "f4")

    @classmethod
    def from_preset(cls, preset: ByteOrderPreset) -> "CodecParams":
        """Create codec params from a preset.

        Args:
            preset: Byte order preset to use

        Returns:
            CodecParams with the preset's byte order
        """
        return jdc.replace(_PRESET_CODECS[preset])


_PRESET_CODECS: dict[ByteOrderPreset, CodecParams] = {
    ByteOrderPreset.JAVA: CodecParams(byte_order="big"),
    ByteOrderPreset.NATIVE: CodecParams(byte_order=sys.byteorder),
}
