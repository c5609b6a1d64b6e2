from typing import Tuple
import numpy as np

from ..white_point import WhitePoint, D65
from .lab import EPSILON, KAPPA

Triple = Tuple[float, float, float]


def _uv_prime(x: float, y: float, z: float) -> Tuple[float, float]:
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0:
        return 0.0, 0.0
    return 4.0 * x / denom, 9.0 * y / denom


def xyz_to_luv(x: float, y: float, z: float, white_point: WhitePoint = D65) -> Triple:
    """Convert from XYZ to Luv."""
    yr = y / white_point.xyz[1]
    l = 116.0 * float(np.cbrt(yr)) - 16.0 if yr > EPSILON else KAPPA * yr
    if x + 15.0 * y + 3.0 * z == 0:
        return l, 0.0, 0.0
    u_prime, v_prime = _uv_prime(x, y, z)
    un, vn = _uv_prime(*white_point.xyz)
    return l, 13.0 * l * (u_prime - un), 13.0 * l * (v_prime - vn)


def luv_to_xyz(l: float, u: float, v: float, white_point: WhitePoint = D65) -> Triple:
    """Convert from Luv to XYZ."""
    # without light there is no color, and the u'/v' recovery divides by L
    if l <= 0.0:
        return 0.0, 0.0, 0.0
    un, vn = _uv_prime(*white_point.xyz)
    u_prime = u / (13.0 * l) + un
    v_prime = v / (13.0 * l) + vn
    if l > KAPPA * EPSILON:
        y = ((l + 16.0) / 116.0) ** 3
    else:
        y = l / KAPPA
    y *= white_point.xyz[1]
    if v_prime == 0:
        return 0.0, y, 0.0
    x = y * 9.0 * u_prime / (4.0 * v_prime)
    z = y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / (4.0 * v_prime)
    return x, y, z
