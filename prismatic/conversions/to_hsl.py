from typing import Tuple
from .to_hsv import hex_hue

Triple = Tuple[float, float, float]


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """Convert unit RGB (0..1) to HSL with h in degrees."""
    maxc = max(r, g, b)
    minc = min(r, g, b)
    delta = maxc - minc
    l = (maxc + minc) / 2.0
    denom = 1.0 - abs(2.0 * l - 1.0)
    s = 0.0 if delta == 0 or denom == 0 else delta / denom
    return hex_hue(r, g, b, maxc, delta), s, l


def hsv_to_hsl(h: float, s: float, v: float) -> Triple:
    l = v * (1.0 - s / 2.0)
    m = min(l, 1.0 - l)
    sl = 0.0 if m == 0 else (v - l) / m
    return h, sl, l
