from typing import Tuple

Triple = Tuple[float, float, float]


def unit_rgb_to_rgi(r: float, g: float, b: float) -> Triple:
    """Red and green chromaticity plus mean intensity; black maps to zero."""
    total = r + g + b
    if total == 0:
        return 0.0, 0.0, 0.0
    return r / total, g / total, total / 3.0
