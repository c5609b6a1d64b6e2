from typing import Any, Optional
from .color_base import (
    ColorBase, Bounded, Invertible, Lerp, Flatten, Homogeneous,
    build_registry, channel_property,
)
from .rgb import Rgb
from .rgi import Rgi
from .hsv import Hsv
from .hsl import Hsl
from .hsi import Hsi
from .hwb import Hwb
from .xyz import Xyz, Lms
from .xyy import XyY, Chromaticity, rescale_channels
from .lab import Lab, Luv, Lchab, Lchuv
from .ycbcr import YCbCr, Yiq
from .alpha import Alpha, Rgba, Hsva, Hsla
from ..conversions.wrapper import convert, try_convert


def _convert(self: ColorBase, target: type, **options: Any) -> ColorBase:
    return convert(self, target, **options)


def _try_convert(self: ColorBase, target: type, **options: Any) -> Optional[ColorBase]:
    return try_convert(self, target, **options)


ColorBase.convert = _convert
ColorBase.try_convert = _try_convert

color_classes = build_registry(
    Rgb, Rgi, Hsv, Hsl, Hsi, Hwb,
    Xyz, XyY, Chromaticity, Lab, Luv, Lchab, Lchuv, Lms,
    YCbCr, Yiq,
)

__all__ = [
    "ColorBase", "Bounded", "Invertible", "Lerp", "Flatten", "Homogeneous",
    "build_registry", "channel_property", "color_classes",
    "Rgb", "Rgi", "Hsv", "Hsl", "Hsi", "Hwb",
    "Xyz", "XyY", "Chromaticity", "rescale_channels",
    "Lab", "Luv", "Lchab", "Lchuv", "Lms",
    "YCbCr", "Yiq",
    "Alpha", "Rgba", "Hsva", "Hsla",
]
