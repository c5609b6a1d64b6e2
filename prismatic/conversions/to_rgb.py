import math
from typing import Tuple
from .to_hsv import hwb_to_hsv

Triple = Tuple[float, float, float]


def _chroma_to_rgb(h: float, c: float, m: float) -> Triple:
    hp = (h % 360.0) / 60.0
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    if hp < 1:
        r, g, b = c, x, 0.0
    elif hp < 2:
        r, g, b = x, c, 0.0
    elif hp < 3:
        r, g, b = 0.0, c, x
    elif hp < 4:
        r, g, b = 0.0, x, c
    elif hp < 5:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return r + m, g + m, b + m


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Triple:
    c = v * s
    return _chroma_to_rgb(h, c, v - c)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Triple:
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    return _chroma_to_rgb(h, c, l - c / 2.0)


def hwb_to_unit_rgb(h: float, w: float, b: float) -> Triple:
    return hsv_to_unit_rgb(*hwb_to_hsv(h, w, b))


def hsi_to_unit_rgb(h: float, s: float, i: float) -> Triple:
    """Inverse of the geometric HSI transform, one 120° sector at a time."""
    h = h % 360.0
    sector, offset = divmod(h, 120.0)
    low = i * (1.0 - s)
    high = i * (1.0 + s * math.cos(math.radians(offset)) / math.cos(math.radians(60.0 - offset)))
    rest = 3.0 * i - (low + high)
    if sector == 0:
        return high, rest, low
    if sector == 1:
        return low, high, rest
    return rest, low, high


def rgi_to_unit_rgb(rc: float, gc: float, i: float) -> Triple:
    total = 3.0 * i
    r = rc * total
    g = gc * total
    return r, g, total - r - g
