from typing import Tuple
# No dependencies

Triple = Tuple[float, float, float]


def hex_hue(r: float, g: float, b: float, maxc: float, delta: float) -> float:
    """Hue in degrees on the RGB hexagon; 0 for achromatic colors."""
    if delta == 0:
        return 0.0
    if maxc == r:
        h = ((g - b) / delta) % 6.0
    elif maxc == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    return (h * 60.0) % 360.0


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    """
    Convert unit RGB (0..1) to HSV.

    Returns:
        h ∈ [0, 360), s ∈ [0, 1], v ∈ [0, 1]
    """
    maxc = max(r, g, b)
    minc = min(r, g, b)
    delta = maxc - minc
    s = 0.0 if maxc == 0 else delta / maxc
    return hex_hue(r, g, b, maxc, delta), s, maxc


def hsl_to_hsv(h: float, s: float, l: float) -> Triple:
    v = l + s * min(l, 1.0 - l)
    sv = 0.0 if v == 0 else 2.0 * (1.0 - l / v)
    return h, sv, v


def hwb_to_hsv(h: float, w: float, b: float) -> Triple:
    total = w + b
    if total >= 1.0:
        # achromatic; the pair is scaled down to sum to one
        return h, 0.0, w / total
    v = 1.0 - b
    return h, 1.0 - w / v, v
