import math
from typing import Tuple

Triple = Tuple[float, float, float]


def to_lch(l: float, a: float, b: float) -> Triple:
    """Rectangular (Lab or Luv) -> cylindrical, hue in degrees."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % 360.0 if chroma > 0 else 0.0
    return l, chroma, hue


def from_lch(l: float, chroma: float, hue: float) -> Triple:
    rad = math.radians(hue)
    return l, chroma * math.cos(rad), chroma * math.sin(rad)
