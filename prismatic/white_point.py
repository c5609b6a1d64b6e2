"""
Reference white points for the CIE 1931 2° standard observer.

Each white point carries its XYZ tristimulus values (normalized to ``Y = 1``)
and its xy chromaticity coordinates.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple, Union


@dataclass(frozen=True)
class WhitePoint:
    name: str
    xyz: Tuple[float, float, float]
    xy: Tuple[float, float]

    def __str__(self) -> str:
        return self.name


A = WhitePoint("A", (1.09850, 1.0, 0.35585), (0.44757, 0.40745))
B = WhitePoint("B", (0.99072, 1.0, 0.85223), (0.34842, 0.35161))
C = WhitePoint("C", (0.98074, 1.0, 1.18232), (0.31006, 0.31616))
D50 = WhitePoint("D50", (0.96422, 1.0, 0.82521), (0.34567, 0.35850))
D55 = WhitePoint("D55", (0.95682, 1.0, 0.92149), (0.33242, 0.34743))
D65 = WhitePoint("D65", (0.95047, 1.0, 1.08883), (0.31271, 0.32902))
D75 = WhitePoint("D75", (0.94972, 1.0, 1.22638), (0.29902, 0.31485))
E = WhitePoint("E", (1.0, 1.0, 1.00003), (1.0 / 3.0, 1.0 / 3.0))
F1 = WhitePoint("F1", (0.928336, 1.0, 1.036647), (0.31310, 0.33727))
F2 = WhitePoint("F2", (0.99186, 1.0, 0.67393), (0.37208, 0.37529))
F3 = WhitePoint("F3", (1.037535, 1.0, 0.498605), (0.40910, 0.39430))
F4 = WhitePoint("F4", (1.091473, 1.0, 0.388133), (0.44018, 0.40329))
F5 = WhitePoint("F5", (0.908720, 1.0, 0.987229), (0.31379, 0.34531))
F6 = WhitePoint("F6", (0.973091, 1.0, 0.601905), (0.37790, 0.38835))
F7 = WhitePoint("F7", (0.95041, 1.0, 1.08747), (0.31292, 0.32933))
F8 = WhitePoint("F8", (0.964125, 1.0, 0.823331), (0.34588, 0.35875))
F9 = WhitePoint("F9", (1.003648, 1.0, 0.678684), (0.37417, 0.37281))
F10 = WhitePoint("F10", (0.961735, 1.0, 0.817123), (0.34609, 0.35986))
F11 = WhitePoint("F11", (1.00962, 1.0, 0.64350), (0.38052, 0.37713))
F12 = WhitePoint("F12", (1.080463, 1.0, 0.392275), (0.43695, 0.40441))

WHITE_POINTS: Dict[str, WhitePoint] = {
    wp.name: wp for wp in (
        A, B, C, D50, D55, D65, D75, E,
        F1, F2, F3, F4, F5, F6, F7, F8, F9, F10, F11, F12,
    )
}

DEFAULT_WHITE_POINT = D65


def get_white_point(white_point: Union[str, WhitePoint, None]) -> WhitePoint:
    """Resolve a white point given by name (case-insensitive) or instance."""
    if white_point is None:
        return DEFAULT_WHITE_POINT
    if isinstance(white_point, WhitePoint):
        return white_point
    try:
        return WHITE_POINTS[white_point.upper()]
    except KeyError:
        raise ValueError(f"Unknown white point: {white_point!r}") from None
