"""
RGB color spaces: primaries, reference white and transfer encoding.

The RGB -> XYZ matrix of a space is derived from its primaries and white
point; encoded (nonlinear) RGB is decoded to linear light before the matrix
is applied.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from functools import cached_property
from typing import Tuple, Union
import numpy as np

from .white_point import WhitePoint, D65

Primary = Tuple[float, float]
Encoding = Union[str, float]

LINEAR_NOISE = 1e-12


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if abs(c) <= 0.04045:
        return c / 12.92
    return math.copysign(((abs(c) + 0.055) / 1.055) ** 2.4, c)


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if abs(c) <= 0.0031308:
        return 12.92 * c
    return math.copysign(1.055 * (abs(c) ** (1 / 2.4)) - 0.055, c)


def primaries_to_matrix(red: Primary, green: Primary, blue: Primary,
                        white_point: WhitePoint) -> np.ndarray:
    """RGB -> XYZ matrix whose columns are the primaries scaled to hit the white point."""
    columns = np.array([
        [x / y, 1.0, (1.0 - x - y) / y]
        for x, y in (red, green, blue)
    ]).T
    scale = np.linalg.solve(columns, np.array(white_point.xyz))
    return columns * scale


@dataclass(frozen=True)
class RgbSpace:
    name: str
    red: Primary
    green: Primary
    blue: Primary
    white_point: WhitePoint = D65
    encoding: Encoding = "srgb"

    @cached_property
    def to_xyz_matrix(self) -> np.ndarray:
        return primaries_to_matrix(self.red, self.green, self.blue, self.white_point)

    @cached_property
    def from_xyz_matrix(self) -> np.ndarray:
        return np.linalg.inv(self.to_xyz_matrix)

    def decode(self, c: float) -> float:
        """Encoded channel -> linear light."""
        if self.encoding == "linear":
            return c
        if self.encoding == "srgb":
            return srgb_to_linear(c)
        return math.copysign(abs(c) ** float(self.encoding), c)

    def encode(self, c: float) -> float:
        """Linear light -> encoded channel."""
        if self.encoding == "linear":
            return c
        if self.encoding == "srgb":
            return linear_to_srgb(c)
        return math.copysign(abs(c) ** (1.0 / float(self.encoding)), c)

    def rgb_to_xyz(self, r: float, g: float, b: float) -> Tuple[float, float, float]:
        linear = np.array([self.decode(r), self.decode(g), self.decode(b)])
        x, y, z = self.to_xyz_matrix @ linear
        return float(x), float(y), float(z)

    def xyz_to_rgb(self, x: float, y: float, z: float) -> Tuple[float, float, float]:
        linear = self.from_xyz_matrix @ np.array([x, y, z])
        # gamma encoding magnifies round-off around zero
        linear[np.abs(linear) < LINEAR_NOISE] = 0.0
        r, g, b = (self.encode(float(c)) for c in linear)
        return r, g, b


SRGB = RgbSpace("sRGB", (0.64, 0.33), (0.30, 0.60), (0.15, 0.06), D65, "srgb")
LINEAR_SRGB = RgbSpace("linear sRGB", (0.64, 0.33), (0.30, 0.60), (0.15, 0.06), D65, "linear")
ADOBE_RGB = RgbSpace("Adobe RGB (1998)", (0.64, 0.33), (0.21, 0.71), (0.15, 0.06), D65, 563.0 / 256.0)

DEFAULT_RGB_SPACE = SRGB
