"""Geometric value types: line segments and spheres in 3D space."""

from ._config import ByteOrderPreset as ByteOrderPreset
from ._config import CodecParams as CodecParams
from ._config import FormatParams as FormatParams
from ._errors import DecodeError as DecodeError
from ._format import NumberFormatter as NumberFormatter
from ._format import format_number as format_number
from ._format import scientific_formatter as scientific_formatter
from ._line_segment import LineSegment as LineSegment
from ._sphere import Sphere as Sphere

__version__ = "0.0.0"
