from .format_type import (
    ChannelFormat,
    AngleUnit,
    INTEGER_FORMATS,
    FLOAT_FORMATS,
    ALL_FORMATS,
)

__all__ = [
    "ChannelFormat",
    "AngleUnit",
    "INTEGER_FORMATS",
    "FLOAT_FORMATS",
    "ALL_FORMATS",
]
