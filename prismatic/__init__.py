"""Prismatic: color channels, color spaces and exact conversions between them."""

from .types import ChannelFormat, AngleUnit, INTEGER_FORMATS, FLOAT_FORMATS, ALL_FORMATS
from .channel import Channel, ChannelKind, cast, cast_angle, cast_normal
from .errors import InvariantViolation, UndefinedConversionError
from .colors import (
    ColorBase,
    Bounded,
    Invertible,
    Lerp,
    Flatten,
    Homogeneous,
    Rgb,
    Rgi,
    Hsv,
    Hsl,
    Hsi,
    Hwb,
    Xyz,
    XyY,
    Chromaticity,
    Lab,
    Luv,
    Lchab,
    Lchuv,
    Lms,
    YCbCr,
    Yiq,
    Alpha,
    Rgba,
    Hsva,
    Hsla,
    color_classes,
)
from .conversions import (
    convert,
    try_convert,
    OutOfGamutMode,
    YCbCrModel,
    JpegModel,
    Bt709Model,
    YiqModel,
    CustomYCbCrModel,
    JPEG,
    BT709,
    YIQ,
)
from .rgb_space import RgbSpace, SRGB, LINEAR_SRGB, ADOBE_RGB
from .white_point import WhitePoint, WHITE_POINTS, get_white_point
from . import white_point

__version__ = "1.0.0"

__all__ = [
    # Channels
    "ChannelFormat", "AngleUnit", "INTEGER_FORMATS", "FLOAT_FORMATS", "ALL_FORMATS",
    "Channel", "ChannelKind", "cast", "cast_angle", "cast_normal",

    # Errors
    "InvariantViolation", "UndefinedConversionError",

    # Contracts
    "ColorBase", "Bounded", "Invertible", "Lerp", "Flatten", "Homogeneous",

    # Colors
    "Rgb", "Rgi", "Hsv", "Hsl", "Hsi", "Hwb",
    "Xyz", "XyY", "Chromaticity", "Lab", "Luv", "Lchab", "Lchuv", "Lms",
    "YCbCr", "Yiq",
    "Alpha", "Rgba", "Hsva", "Hsla",
    "color_classes",

    # Conversions
    "convert", "try_convert", "OutOfGamutMode",
    "YCbCrModel", "JpegModel", "Bt709Model", "YiqModel", "CustomYCbCrModel",
    "JPEG", "BT709", "YIQ",
    "RgbSpace", "SRGB", "LINEAR_SRGB", "ADOBE_RGB",
    "WhitePoint", "WHITE_POINTS", "get_white_point", "white_point",
]
