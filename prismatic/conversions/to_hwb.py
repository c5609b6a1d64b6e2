from typing import Tuple
from .to_hsv import unit_rgb_to_hsv

Triple = Tuple[float, float, float]


def hsv_to_hwb(h: float, s: float, v: float) -> Triple:
    return h, (1.0 - s) * v, 1.0 - v


def unit_rgb_to_hwb(r: float, g: float, b: float) -> Triple:
    return hsv_to_hwb(*unit_rgb_to_hsv(r, g, b))
