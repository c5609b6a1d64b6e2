"""
Channel cast engine.

``cast`` converts a scalar between any two channel formats and never raises
for a value of the source format. Narrowing casts drop the low bits.

Rules
-----
- integer -> wider integer: replicate the bit pattern (``0xFF`` -> ``0xFFFF``)
- integer -> narrower integer: keep the most significant bits
- integer -> float: divide by the integer maximum
- float -> integer: multiply by ``max + 0.99`` and floor, saturating, so that
  values just under 1.0 still reach the maximum
- float -> float: direct conversion
- angle -> angle: cast the scalar, then rescale by the ratio of the periods
"""

from __future__ import annotations
import math
from typing import Optional

from ..types.format_type import ChannelFormat, AngleUnit, format_bits, max_pos_normal
from .kinds import ChannelKind
from .scalar import coerce_scalar

FLOAT_TO_INT_BIAS = 0.99


def cast(value, from_format: ChannelFormat, to_format: ChannelFormat):
    """Cast a positive-normal scalar from one channel format to another."""
    if from_format.is_integer and to_format.is_integer:
        return _int_to_int(int(value), from_format, to_format)
    if from_format.is_integer:
        return coerce_scalar(int(value) / max_pos_normal[from_format], to_format)
    if to_format.is_integer:
        return _float_to_int(float(value), to_format)
    return coerce_scalar(value, to_format)


def _int_to_int(value: int, from_format: ChannelFormat, to_format: ChannelFormat) -> int:
    from_bits = format_bits[from_format]
    to_bits = format_bits[to_format]
    if to_bits == from_bits:
        return value
    if to_bits > from_bits:
        # (2**16 - 1) // (2**8 - 1) == 0x0101, and so on for every widening
        repeat = max_pos_normal[to_format] // max_pos_normal[from_format]
        return value * repeat
    return value >> (from_bits - to_bits)


def _float_to_int(value: float, to_format: ChannelFormat) -> int:
    maxv = max_pos_normal[to_format]
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 1.0:
        return maxv
    return min(math.floor(value * (maxv + FLOAT_TO_INT_BIAS)), maxv)


def cast_normal(value, from_format: ChannelFormat, to_format: ChannelFormat):
    """Cast a symmetric channel; integers store ``[-1, 1]`` as ``[0, max]``."""
    if from_format.is_integer == to_format.is_integer:
        return cast(value, from_format, to_format)
    if from_format.is_integer:
        return coerce_scalar(cast(value, from_format, ChannelFormat.F64) * 2.0 - 1.0, to_format)
    return cast((float(value) + 1.0) / 2.0, from_format, to_format)


def cast_angle(value: float, from_unit: AngleUnit, to_unit: AngleUnit,
               from_format: ChannelFormat = ChannelFormat.F64,
               to_format: ChannelFormat = ChannelFormat.F64) -> float:
    """Cast an angle, preserving its fractional position around the circle."""
    scalar = cast(value, from_format, to_format)
    if from_unit is to_unit:
        return scalar
    return coerce_scalar(scalar * (to_unit.period / from_unit.period), to_format)


def cast_channel(kind: ChannelKind, value, from_format: ChannelFormat, to_format: ChannelFormat,
                 from_unit: Optional[AngleUnit] = None, to_unit: Optional[AngleUnit] = None):
    if kind is ChannelKind.ANGULAR:
        return cast_angle(value, from_unit, to_unit or from_unit, from_format, to_format)
    if kind is ChannelKind.NORMAL:
        return cast_normal(value, from_format, to_format)
    if kind is ChannelKind.FREE and to_format.is_integer:
        raise TypeError("Free channels cannot be stored in integer formats")
    return cast(value, from_format, to_format)
