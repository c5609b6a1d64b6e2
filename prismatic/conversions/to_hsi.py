import math
from typing import Tuple

Triple = Tuple[float, float, float]


def unit_rgb_to_hsi(r: float, g: float, b: float) -> Triple:
    """
    Convert unit RGB (0..1) to HSI.

    The hue is the geometric angle around the achromatic axis, which differs
    slightly from the hexagonal hue used by HSV and HSL.
    """
    i = (r + g + b) / 3.0
    s = 0.0 if i == 0 else 1.0 - min(r, g, b) / i
    num = 0.5 * ((r - g) + (r - b))
    den = math.sqrt((r - g) ** 2 + (r - b) * (g - b))
    if den == 0:
        return 0.0, s, i
    theta = math.degrees(math.acos(max(-1.0, min(1.0, num / den))))
    h = 360.0 - theta if b > g else theta
    return h % 360.0, s, i
