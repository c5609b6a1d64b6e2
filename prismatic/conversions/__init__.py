"""
Prismatic Color Space Conversions
=================================

Scalar conversion functions between color spaces, the YCbCr model engine and
a routing layer that chains them.

Conversion Functions
-------------------

RGB ↔ cylindrical (unit RGB, hue in degrees):
    unit_rgb_to_hsv / hsv_to_unit_rgb
    unit_rgb_to_hsl / hsl_to_unit_rgb
    unit_rgb_to_hwb / hwb_to_unit_rgb
    unit_rgb_to_hsi / hsi_to_unit_rgb
    unit_rgb_to_rgi / rgi_to_unit_rgb
    hsv_to_hsl, hsl_to_hsv, hsv_to_hwb, hwb_to_hsv

CIE:
    xyz_to_lab(x, y, z, white_point) / lab_to_xyz(l, a, b, white_point)
    xyz_to_luv / luv_to_xyz
    xyz_to_xyy / xyy_to_xyz
    xyz_to_lms / lms_to_xyz
    to_lch / from_lch

YCbCr models:
    JPEG, BT709, YIQ, CustomYCbCrModel.build_from_coefficients(kr, kb)
    OutOfGamutMode.PRESERVE / OutOfGamutMode.CLIP

High-Level API
-------------
    convert(color, target, white_point=..., rgb_space=..., model=..., out_of_gamut=...)
    try_convert(color, target, ...)  -> None when out of gamut

Examples
--------
>>> from prismatic import Rgb, Lab, convert
>>> convert(Rgb(1.0, 1.0, 1.0), Lab).approx_eq(Lab(100.0, 0.0, 0.0), 1e-2)
True
"""

from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb, hwb_to_unit_rgb, hsi_to_unit_rgb, rgi_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv, hwb_to_hsv
from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl
from .to_hwb import unit_rgb_to_hwb, hsv_to_hwb
from .to_hsi import unit_rgb_to_hsi
from .to_rgi import unit_rgb_to_rgi
from .lab import xyz_to_lab, lab_to_xyz, EPSILON, KAPPA
from .luv import xyz_to_luv, luv_to_xyz
from .lch import to_lch, from_lch
from .xyy import xyz_to_xyy, xyy_to_xyz
from .lms import xyz_to_lms, lms_to_xyz, LMS_MATRICES
from .ycbcr_model import (
    YCbCrModel, JpegModel, Bt709Model, YiqModel, CustomYCbCrModel,
    OutOfGamutMode, build_transform, JPEG, BT709, YIQ,
)
from .wrapper import convert, try_convert, find_path, register, ConversionOptions

__all__ = [
    "hsv_to_unit_rgb", "hsl_to_unit_rgb", "hwb_to_unit_rgb", "hsi_to_unit_rgb", "rgi_to_unit_rgb",
    "unit_rgb_to_hsv", "hsl_to_hsv", "hwb_to_hsv",
    "unit_rgb_to_hsl", "hsv_to_hsl",
    "unit_rgb_to_hwb", "hsv_to_hwb",
    "unit_rgb_to_hsi", "unit_rgb_to_rgi",
    "xyz_to_lab", "lab_to_xyz", "EPSILON", "KAPPA",
    "xyz_to_luv", "luv_to_xyz",
    "to_lch", "from_lch",
    "xyz_to_xyy", "xyy_to_xyz",
    "xyz_to_lms", "lms_to_xyz", "LMS_MATRICES",
    "YCbCrModel", "JpegModel", "Bt709Model", "YiqModel", "CustomYCbCrModel",
    "OutOfGamutMode", "build_transform", "JPEG", "BT709", "YIQ",
    "convert", "try_convert", "find_path", "register", "ConversionOptions",
]
