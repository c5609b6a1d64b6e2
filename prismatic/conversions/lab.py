"""
CIE L*a*b* <-> XYZ, parameterized by a reference white point.

    fx = f(X/Xw), fy = f(Y/Yw), fz = f(Z/Zw)
    L = 116*fy - 16;  a = 500*(fx - fy);  b = 200*(fy - fz)
    f(t) = cbrt(t)              if t > EPSILON
         = (KAPPA*t + 16) / 116 otherwise

EPSILON and KAPPA are the exact CIE rationals 216/24389 and 24389/27.
"""

from typing import Tuple
import numpy as np

from ..white_point import WhitePoint, D65

Triple = Tuple[float, float, float]

EPSILON = 0.008856451679035631
KAPPA = 903.2962962963


def _f(t: float) -> float:
    if t > EPSILON:
        return float(np.cbrt(t))
    return (KAPPA * t + 16.0) / 116.0


def _f_inverse(ft: float) -> float:
    cube = ft ** 3
    if cube > EPSILON:
        return cube
    return (116.0 * ft - 16.0) / KAPPA


def xyz_to_lab(x: float, y: float, z: float, white_point: WhitePoint = D65) -> Triple:
    xw, yw, zw = white_point.xyz
    fx = _f(x / xw)
    fy = _f(y / yw)
    fz = _f(z / zw)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def lab_to_xyz(l: float, a: float, b: float, white_point: WhitePoint = D65) -> Triple:
    xw, yw, zw = white_point.xyz
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    if l > KAPPA * EPSILON:
        yr = fy ** 3
    else:
        yr = l / KAPPA
    return _f_inverse(fx) * xw, yr * yw, _f_inverse(fz) * zw
