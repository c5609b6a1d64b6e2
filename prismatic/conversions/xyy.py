from typing import Tuple

from ..errors import InvariantViolation

Triple = Tuple[float, float, float]


def xyz_to_xyy(x: float, y: float, z: float) -> Triple:
    if x < 0 or y < 0 or z < 0:
        raise InvariantViolation(f"XYZ ({x}, {y}, {z}) has no chromaticity: negative tristimulus value")
    total = x + y + z
    if total == 0:
        return 0.0, 0.0, 0.0
    return x / total, y / total, y


def xyy_to_xyz(x: float, y: float, luminance: float) -> Triple:
    if y == 0:
        return 0.0, 0.0, 0.0
    return x * luminance / y, luminance, (1.0 - x - y) * luminance / y
