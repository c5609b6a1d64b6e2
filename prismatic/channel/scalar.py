"""
Scalar contracts for channel representations.

Every channel value is stored as a plain Python scalar: ``int`` for the
unsigned integer formats and ``float`` for the floating point formats. ``F32``
values are rounded through ``numpy.float32`` when they enter a color, so a
color never holds more precision than its format can represent.
"""

from __future__ import annotations
import math
from typing import Any
import numpy as np

from ..errors import InvariantViolation
from ..types.format_type import ChannelFormat, format_bits, max_pos_normal


def coerce_scalar(value: Any, fmt: ChannelFormat) -> int | float:
    """Convert ``value`` to the Python scalar used to store ``fmt`` channels.

    Integer formats accept integral values only and reject values that are not
    a valid bit pattern of the format.
    """
    if fmt.is_integer:
        if isinstance(value, (float, np.floating)):
            if not float(value).is_integer():
                raise TypeError(f"{fmt.value} channels expect integral values, got {value!r}")
        elif not isinstance(value, (int, np.integer)):
            raise TypeError(f"{fmt.value} channels expect integral values, got {type(value).__name__}")
        ivalue = int(value)
        if not 0 <= ivalue <= max_pos_normal[fmt]:
            raise InvariantViolation(
                f"{ivalue} does not fit in a {fmt.value} channel (0..{max_pos_normal[fmt]})"
            )
        return ivalue

    if not isinstance(value, (int, float, np.integer, np.floating)):
        raise TypeError(f"{fmt.value} channels expect real numbers, got {type(value).__name__}")
    if fmt is ChannelFormat.F32:
        return float(np.float32(value))
    return float(value)


def saturate_int(value: float | int, fmt: ChannelFormat) -> int:
    """Truncate toward zero and saturate into the range of an integer format."""
    if isinstance(value, float) and math.isnan(value):
        return 0
    if value <= 0:
        return 0
    maxv = max_pos_normal[fmt]
    if value >= maxv:
        return maxv
    return int(value)


# integer results within this much below a whole number count as that number
TRUNCATE_SLACK = 1e-9


def truncate_to_format(value: float, fmt: ChannelFormat) -> int | float:
    """Store a float computation result in ``fmt``; integers truncate and saturate."""
    if fmt.is_integer:
        if math.isnan(value):
            return 0
        return saturate_int(value + TRUNCATE_SLACK, fmt)
    return coerce_scalar(value, fmt)



def zero(fmt: ChannelFormat) -> int | float:
    return 0 if fmt.is_integer else 0.0


def bit_width(fmt: ChannelFormat) -> int:
    return format_bits[fmt]


def sum_tolerance(fmt: ChannelFormat) -> float:
    """Slack allowed when channels constrained to sum to one are checked."""
    if fmt is ChannelFormat.F32:
        return float(np.finfo(np.float32).eps)
    return 1e-12
