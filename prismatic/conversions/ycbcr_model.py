"""
YCbCr / YIQ model engine.

A model is a 3x3 RGB -> YCbCr matrix, its inverse, a per-format shift that
re-centres the signed chroma channels into unsigned integer storage, and an
optional canonical scale relating the internal ``[-1, 1]`` chroma range to
the range published by a standard.

Unit models (:data:`JPEG`, :data:`BT709`, :data:`YIQ`) are stateless
singletons; :class:`CustomYCbCrModel` is built at runtime from two luma
coefficients and shared by reference between the colors that use it.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Optional, Sequence, Tuple
import numpy as np

from ..types.format_type import ChannelFormat, max_pos_normal

logger = logging.getLogger(__name__)

Triple = Tuple[float, float, float]


class OutOfGamutMode(str, Enum):
    """What an inverse transform does with RGB outside ``[0, max]``."""
    PRESERVE = "preserve"
    CLIP = "clip"


def build_transform(kr: float, kb: float) -> np.ndarray:
    """Forward RGB -> YCbCr matrix from the red and blue luma coefficients."""
    kg = 1.0 - kr - kb
    return np.array([
        [kr, kg, kb],
        [-0.5 * kr / (1.0 - kb), -0.5 * kg / (1.0 - kb), 0.5],
        [0.5, -0.5 * kg / (1.0 - kr), -0.5 * kb / (1.0 - kr)],
    ])


class YCbCrModel(ABC):
    canonical_scale: ClassVar[Optional[Triple]] = None

    @abstractmethod
    def forward_transform(self) -> np.ndarray:
        ...

    @abstractmethod
    def inverse_transform(self) -> np.ndarray:
        ...

    def shift(self, fmt: ChannelFormat) -> Triple:
        if not fmt.is_integer:
            return (0.0, 0.0, 0.0)
        half = max_pos_normal[fmt] // 2 + 1
        return (0, half, half)

    def forward(self, rgb: Sequence[float], fmt: ChannelFormat) -> Triple:
        """RGB -> YCbCr in the scale of ``fmt`` (unrounded)."""
        out = self.forward_transform() @ np.asarray(rgb, dtype=np.float64)
        out = out + np.asarray(self.shift(fmt), dtype=np.float64)
        y, cb, cr = (float(v) for v in out)
        return y, cb, cr

    def inverse(self, ycbcr: Sequence[float], fmt: ChannelFormat) -> Triple:
        """YCbCr -> exact RGB in the scale of ``fmt`` (unrounded, possibly out of gamut)."""
        unshifted = np.asarray(ycbcr, dtype=np.float64) - np.asarray(self.shift(fmt), dtype=np.float64)
        r, g, b = (float(v) for v in self.inverse_transform() @ unshifted)
        return r, g, b

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class JpegModel(YCbCrModel):
    """ITU-R BT.601 coefficients with the JFIF inverse matrix."""

    canonical_scale: ClassVar[Optional[Triple]] = (1.0, 0.436, 0.615)
    _forward = np.array([
        [0.299, 0.587, 0.114],
        [-0.168736, -0.331264, 0.5],
        [0.5, -0.418688, -0.081312],
    ])
    _inverse = np.array([
        [1.0, 0.0, 1.402],
        [1.0, -0.3441, -0.7141],
        [1.0, 1.772, 0.0],
    ])

    def forward_transform(self) -> np.ndarray:
        return self._forward

    def inverse_transform(self) -> np.ndarray:
        return self._inverse


class Bt709Model(YCbCrModel):
    """ITU-R BT.709 (HDTV) luma coefficients."""

    canonical_scale: ClassVar[Optional[Triple]] = (1.0, 0.436, 0.615)
    _forward = build_transform(0.2126, 0.0722)
    _inverse = np.linalg.inv(_forward)

    def forward_transform(self) -> np.ndarray:
        return self._forward

    def inverse_transform(self) -> np.ndarray:
        return self._inverse


class YiqModel(YCbCrModel):
    """
    NTSC YIQ.

    Internally I and Q are stored in ``[-1, 1]``; the canonical scale maps
    them back to the published ranges (``±0.5957`` and ``±0.5226``).
    """

    canonical_scale: ClassVar[Optional[Triple]] = (1.0, 0.5957, 0.5226)
    _forward = np.diag(1.0 / np.array([1.0, 0.5957, 0.5226])) @ np.array([
        [0.299, 0.587, 0.114],
        [0.595716, -0.274453, -0.321263],
        [0.211456, -0.522591, 0.311135],
    ])
    _inverse = np.array([
        [1.0, 0.956, 0.621],
        [1.0, -0.272, -0.647],
        [1.0, -1.106, 1.703],
    ]) @ np.diag([1.0, 0.5957, 0.5226])

    def forward_transform(self) -> np.ndarray:
        return self._forward

    def inverse_transform(self) -> np.ndarray:
        return self._inverse


class CustomYCbCrModel(YCbCrModel):
    """A model built at runtime from arbitrary ``kr``/``kb`` coefficients."""

    def __init__(self, kr: float, kb: float):
        if not (0.0 < kr < 1.0 and 0.0 < kb < 1.0 and kr + kb < 1.0):
            raise ValueError(f"Invalid luma coefficients kr={kr}, kb={kb}")
        self.kr = kr
        self.kb = kb
        self._forward = build_transform(kr, kb)
        self._inverse = np.linalg.inv(self._forward)
        logger.debug("Built YCbCr model kr=%s kb=%s", kr, kb)

    @classmethod
    def build_from_coefficients(cls, kr: float, kb: float) -> CustomYCbCrModel:
        return cls(kr, kb)

    def forward_transform(self) -> np.ndarray:
        return self._forward

    def inverse_transform(self) -> np.ndarray:
        return self._inverse

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CustomYCbCrModel) and (self.kr, self.kb) == (other.kr, other.kb)

    def __hash__(self) -> int:
        return hash((CustomYCbCrModel, self.kr, self.kb))

    def __repr__(self) -> str:
        return f"CustomYCbCrModel(kr={self.kr}, kb={self.kb})"


JPEG = JpegModel()
BT709 = Bt709Model()
YIQ = YiqModel()
DEFAULT_MODEL = JPEG
