from .kinds import (
    Channel,
    ChannelKind,
    min_bound,
    max_bound,
    is_normalized,
    normalize,
    invert,
    lerp,
    lerp_angle,
    wrap_angle,
)
from .cast import cast, cast_angle, cast_normal, cast_channel
from .scalar import coerce_scalar, saturate_int, truncate_to_format, zero, sum_tolerance

__all__ = [
    "Channel",
    "ChannelKind",
    "min_bound",
    "max_bound",
    "is_normalized",
    "normalize",
    "invert",
    "lerp",
    "lerp_angle",
    "wrap_angle",
    "cast",
    "cast_angle",
    "cast_normal",
    "cast_channel",
    "coerce_scalar",
    "saturate_int",
    "truncate_to_format",
    "zero",
    "sum_tolerance",
]
