from typing import Optional, TypeVar
from ..types.format_type import ChannelFormat, AngleUnit

T = TypeVar('T')

DEFAULT_FORMAT = ChannelFormat.F64
DEFAULT_ANGLE_UNIT = AngleUnit.DEGREES
DEFAULT_EPSILON = 1e-6


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
