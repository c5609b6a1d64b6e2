"""
Channel kinds and the per-channel contract operations.

A color is an ordered tuple of channels; each channel is described by a
:class:`Channel` (a name and a :class:`ChannelKind`). The functions in this
module implement boundedness, inversion and interpolation for a single
channel value so that concrete color classes never implement them per field.

Kinds
-----
POS_NORMAL
    Bounded-positive: ``[0, max]`` where ``max`` is the integer maximum or 1.0.
NORMAL
    Bounded-symmetric: ``[-1, 1]`` for floats. Unsigned integer storage covers
    ``[0, max]`` and every bit pattern is in range.
FREE
    Unbounded float channel (Lab ``a``/``b``, XYZ tristimulus values).
ANGULAR
    Periodic channel measured in an :class:`AngleUnit`, normalized into
    ``[0, period)``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import math
from fractions import Fraction
from typing import Optional

from boundednumbers.functions import clamp, cyclic_wrap_float

from ..types.format_type import ChannelFormat, AngleUnit, max_pos_normal
from .scalar import coerce_scalar, saturate_int


class ChannelKind(str, Enum):
    POS_NORMAL = "pos_normal"
    NORMAL = "normal"
    FREE = "free"
    ANGULAR = "angular"

    @property
    def is_bounded(self) -> bool:
        return self in (ChannelKind.POS_NORMAL, ChannelKind.NORMAL)


@dataclass(frozen=True)
class Channel:
    name: str
    kind: ChannelKind


def min_bound(kind: ChannelKind, fmt: ChannelFormat, unit: Optional[AngleUnit] = None) -> float | int:
    if kind is ChannelKind.POS_NORMAL:
        return 0 if fmt.is_integer else 0.0
    if kind is ChannelKind.NORMAL:
        return 0 if fmt.is_integer else -1.0
    if kind is ChannelKind.ANGULAR:
        return 0.0
    return float("-inf")


def max_bound(kind: ChannelKind, fmt: ChannelFormat, unit: Optional[AngleUnit] = None) -> float | int:
    if kind.is_bounded:
        return max_pos_normal[fmt]
    if kind is ChannelKind.ANGULAR:
        return _unit(unit).period
    return float("inf")


def is_normalized(kind: ChannelKind, value, fmt: ChannelFormat, unit: Optional[AngleUnit] = None) -> bool:
    if kind is ChannelKind.FREE or fmt.is_integer:
        return True
    if kind is ChannelKind.ANGULAR:
        return 0.0 <= value < _unit(unit).period
    return min_bound(kind, fmt) <= value <= max_bound(kind, fmt)


def normalize(kind: ChannelKind, value, fmt: ChannelFormat, unit: Optional[AngleUnit] = None):
    if kind is ChannelKind.FREE or fmt.is_integer:
        return value
    if kind is ChannelKind.ANGULAR:
        return wrap_angle(value, _unit(unit), fmt)
    return coerce_scalar(float(clamp(value, min_bound(kind, fmt), max_bound(kind, fmt))), fmt)


def wrap_angle(value: float, unit: AngleUnit, fmt: ChannelFormat = ChannelFormat.F64) -> float:
    period = unit.period
    if 0.0 <= value < period:
        return value
    wrapped = float(cyclic_wrap_float(value, 0.0, period))
    # a tiny negative value can wrap onto the period itself
    if wrapped >= period:
        wrapped -= period
    return coerce_scalar(wrapped, fmt)


def invert(kind: ChannelKind, value, fmt: ChannelFormat, unit: Optional[AngleUnit] = None):
    if kind is ChannelKind.FREE:
        raise TypeError("Free channels have no bounds and cannot be inverted")
    if kind is ChannelKind.ANGULAR:
        return wrap_angle(value + _unit(unit).half_period, _unit(unit), fmt)
    return coerce_scalar(min_bound(kind, fmt) + max_bound(kind, fmt) - value, fmt)


def lerp(kind: ChannelKind, left, right, pos: float, fmt: ChannelFormat,
         unit: Optional[AngleUnit] = None):
    """Interpolate one channel; ``pos`` is not clamped to ``[0, 1]``."""
    if kind is ChannelKind.ANGULAR:
        return lerp_angle(left, right, pos, _unit(unit), fmt)
    if fmt.is_integer:
        return lerp_int(left, right, pos, fmt)
    return coerce_scalar(left * (1.0 - pos) + right * pos, fmt)


def lerp_int(left: int, right: int, pos: float, fmt: ChannelFormat) -> int:
    if math.isnan(pos):
        return 0
    if math.isinf(pos):
        return left if left == right else saturate_int((right - left) * pos, fmt)
    # exact rational arithmetic keeps 64-bit channels from losing precision
    t = Fraction(pos)
    return saturate_int(left * (1 - t) + right * t, fmt)


def lerp_angle(left: float, right: float, pos: float, unit: AngleUnit,
               fmt: ChannelFormat = ChannelFormat.F64) -> float:
    """Interpolate along the shorter arc between two angles."""
    period = unit.period
    half = unit.half_period
    diff = right - left
    if diff > half:
        diff -= period
    elif diff < -half:
        diff += period
    return wrap_angle(left + diff * pos, unit, fmt)


def _unit(unit: Optional[AngleUnit]) -> AngleUnit:
    if unit is None:
        raise TypeError("Angular channels require an angle unit")
    return unit
