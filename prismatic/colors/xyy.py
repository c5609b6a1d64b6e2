"""
CIE xyY and bare xy chromaticity.

The chromaticity coordinates satisfy ``x >= 0``, ``y >= 0`` and
``x + y <= 1``; ``z = 1 - x - y`` is implied. Setting one of ``x``, ``y`` or
``z`` rescales the other two proportionally so that the three still sum to
one, or splits the remainder evenly when the other two are both zero.
"""

from __future__ import annotations
from typing import ClassVar, Tuple
from ..channel.kinds import Channel, ChannelKind
from ..channel.scalar import sum_tolerance
from ..errors import InvariantViolation
from ..types.format_type import ChannelFormat
from .color_base import ColorBase
from .xyz import FreeColor


def rescale_channels(primary: float, c2: float, c3: float) -> Tuple[float, float, float]:
    """Set ``primary`` and rescale ``c2``/``c3`` so that the three sum to one."""
    if not 0.0 <= primary <= 1.0:
        raise InvariantViolation(f"chromaticity coordinate {primary} is outside [0, 1]")
    remainder = 1.0 - primary
    total = c2 + c3
    if total > 0.0:
        return primary, c2 * remainder / total, c3 * remainder / total
    return primary, remainder / 2.0, remainder / 2.0


def check_chromaticity(x: float, y: float, fmt: ChannelFormat = ChannelFormat.F64) -> None:
    if x < 0.0 or y < 0.0:
        raise InvariantViolation(f"chromaticity ({x}, {y}) has a negative coordinate")
    # a rescaled pair can land a rounding error above one
    if x + y > 1.0 + sum_tolerance(fmt):
        raise InvariantViolation(f"chromaticity ({x}, {y}) sums to more than 1")


class _ChromaticityMixin:
    x: float
    y: float
    format_type: ChannelFormat

    def _validate(self) -> None:
        check_chromaticity(self.x, self.y, self.format_type)

    @property
    def z(self) -> float:
        return 1.0 - self.x - self.y

    def with_x(self, value: float):
        x, y, _ = rescale_channels(value, self.y, self.z)
        return self._with_xy(x, y)

    def with_y(self, value: float):
        y, x, _ = rescale_channels(value, self.x, self.z)
        return self._with_xy(x, y)

    def with_z(self, value: float):
        _, x, y = rescale_channels(value, self.x, self.y)
        return self._with_xy(x, y)

    def with_channel(self, name: str, value):
        if name == "x":
            return self.with_x(value)
        if name == "y":
            return self.with_y(value)
        return ColorBase.with_channel(self, name, value)


class XyY(_ChromaticityMixin, FreeColor):
    """xy chromaticity plus luminance ``Y``."""

    space: ClassVar[str] = "xyy"
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("x", ChannelKind.POS_NORMAL),
        Channel("y", ChannelKind.POS_NORMAL),
        Channel("Y", ChannelKind.FREE),
    )

    def _with_xy(self, x: float, y: float) -> XyY:
        return self._replace([x, y, self.Y])


class Chromaticity(_ChromaticityMixin, FreeColor):
    """Bare xy chromaticity coordinates."""

    space: ClassVar[str] = "chromaticity"
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("x", ChannelKind.POS_NORMAL),
        Channel("y", ChannelKind.POS_NORMAL),
    )

    def _with_xy(self, x: float, y: float) -> Chromaticity:
        return self._replace([x, y])
