from __future__ import annotations
from typing import Any, ClassVar, Optional, Sequence, Tuple

from ..channel.kinds import Channel, ChannelKind
from ..channel.scalar import truncate_to_format
from ..conversions.ycbcr_model import YCbCrModel, OutOfGamutMode, JPEG, YIQ
from ..types.format_type import ChannelFormat, max_pos_normal
from ..utils.default import value_or_default
from .color_base import ColorBase, Bounded, Invertible, Lerp, Flatten, channel_property
from .rgb import Rgb


class YCbCr(ColorBase, Bounded, Invertible, Lerp, Flatten):
    """
    Luma plus two chroma channels under a :class:`YCbCrModel`.

    Float chroma lives in ``[-1, 1]``; integer formats store chroma shifted by
    half the range. The model is part of the color's identity, so colors under
    different models never compare equal or interpolate together.
    """

    space: ClassVar[str] = "ycbcr"
    default_model: ClassVar[YCbCrModel] = JPEG
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("luma", ChannelKind.POS_NORMAL),
        Channel("cb", ChannelKind.NORMAL),
        Channel("cr", ChannelKind.NORMAL),
    )

    model: YCbCrModel

    def __init__(self, luma: Any, cb: Any, cr: Any, model: Optional[YCbCrModel] = None) -> None:
        self.model = value_or_default(model, self.default_model)
        super().__init__(luma, cb, cr)

    def _identity(self) -> Tuple[Any, ...]:
        return super()._identity() + (self.model,)

    def _replace(self, values: Sequence[Any], target: Optional[type] = None):
        return (target or type(self))(*values, model=self.model)

    def __repr__(self) -> str:
        values = ', '.join(repr(v) for v in self._flat())
        if self.model == self.default_model:
            return f"{type(self).__name__}({values})"
        return f"{type(self).__name__}({values}, model={self.model!r})"

    @classmethod
    def from_rgb(cls, rgb: Rgb, model: Optional[YCbCrModel] = None) -> YCbCr:
        """Forward transform, keeping the format of ``rgb``. Integers truncate."""
        model = value_or_default(model, cls.default_model)
        fmt = rgb.format_type
        values = model.forward(rgb.values, fmt)
        return cls.specialize(fmt)(*(truncate_to_format(v, fmt) for v in values), model=model)

    def _exact_rgb(self) -> Tuple[float, float, float]:
        return self.model.inverse(self.values, self.format_type)

    def to_rgb(self, out_of_gamut: OutOfGamutMode = OutOfGamutMode.PRESERVE) -> Rgb:
        """
        Inverse transform into RGB of the same format.

        ``PRESERVE`` keeps the exact result (integer formats still saturate);
        ``CLIP`` clamps every channel into range.
        """
        fmt = self.format_type
        rgb = Rgb.specialize(fmt)(*(truncate_to_format(v, fmt) for v in self._exact_rgb()))
        if OutOfGamutMode(out_of_gamut) is OutOfGamutMode.CLIP:
            return rgb.normalize()
        return rgb

    def try_to_rgb(self) -> Optional[Rgb]:
        """The exact RGB result, or ``None`` when it falls outside the gamut."""
        exact = self._exact_rgb()
        if self.format_type.is_integer:
            upper = max_pos_normal[self.format_type] + 1
            in_gamut = all(-1 < v < upper for v in exact)
        else:
            in_gamut = all(0.0 <= v <= 1.0 for v in exact)
        return self.to_rgb() if in_gamut else None

    def to_canonical_representation(self) -> Tuple[float, float, float]:
        """Channels rescaled to the ranges published by the model's standard."""
        scale = value_or_default(self.model.canonical_scale, (1.0, 1.0, 1.0))
        floats = self.color_cast(ChannelFormat.F64).values
        y, cb, cr = (v * s for v, s in zip(floats, scale))
        return y, cb, cr

    @classmethod
    def from_canonical_representation(cls, luma: float, cb: float, cr: float,
                                      model: Optional[YCbCrModel] = None) -> YCbCr:
        model = value_or_default(model, cls.default_model)
        scale = value_or_default(model.canonical_scale, (1.0, 1.0, 1.0))
        return cls.specialize(ChannelFormat.F64)(luma / scale[0], cb / scale[1], cr / scale[2], model=model)


class Yiq(YCbCr):
    """YCbCr under the NTSC YIQ model; ``i`` and ``q`` alias ``cb`` and ``cr``."""

    space: ClassVar[str] = "yiq"
    default_model: ClassVar[YCbCrModel] = YIQ

    i = channel_property(1)
    q = channel_property(2)

    def with_i(self, value: Any) -> Yiq:
        return self.with_channel("cb", value)

    def with_q(self, value: Any) -> Yiq:
        return self.with_channel("cr", value)
