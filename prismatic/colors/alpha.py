"""
Alpha decorator.

``Alpha[Inner]`` adds one bounded-positive alpha channel, in the inner
color's format, to any color class. Contract operations delegate to the inner
color for its own channels and treat alpha the same way independently.

    >>> Rgba(1.0, 0.5, 0.0, 0.25).alpha
    0.25
    >>> Rgb(1.0, 0.5, 0.0).with_alpha(0.25) == Rgba(1.0, 0.5, 0.0, 0.25)
    True
"""

from __future__ import annotations
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple

from ..channel import kinds
from ..channel.cast import cast
from ..channel.kinds import Channel, ChannelKind
from ..channel.scalar import coerce_scalar
from ..types.format_type import AngleUnit, ChannelFormat
from .color_base import ColorBase, Bounded, Invertible, Lerp, Flatten
from .rgb import Rgb
from .hsv import Hsv
from .hsl import Hsl

ALPHA_CHANNEL = Channel("alpha", ChannelKind.POS_NORMAL)


class Alpha(ColorBase, Bounded, Invertible, Lerp, Flatten):
    space: ClassVar[str] = "alpha"
    inner_class: ClassVar[Optional[type[ColorBase]]] = None
    _wrapped: ClassVar[Dict[type, type]] = {}

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls.inner_class is None:
            if len(args) != 2 or not isinstance(args[0], ColorBase):
                raise TypeError("Alpha(color, alpha) expects a color and an alpha value")
            cls = Alpha.wrap(type(args[0]))
        return object.__new__(cls)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        if len(args) == 2 and isinstance(args[0], ColorBase):
            inner, alpha = args
            if type(inner) is not self.inner_class:
                raise TypeError(f"{type(self).__name__} cannot wrap {type(inner).__name__}")
        else:
            if len(args) != self.num_channels:
                raise TypeError(
                    f"{type(self).__name__} expects {self.num_channels} channels, got {len(args)}"
                )
            inner = self.inner_class(*args[:-1], **kwargs)
            alpha = args[-1]
        self._value = (inner, coerce_scalar(alpha, self.format_type))
        super(ColorBase, self).__setattr__('_is_frozen', True)

    # ------------------ SPECIALIZATION ------------------
    @classmethod
    def wrap(cls, inner_class: type[ColorBase]) -> type[Alpha]:
        if issubclass(inner_class, Alpha):
            raise TypeError("Alpha colors cannot be nested")
        wrapped = Alpha._wrapped.get(inner_class)
        if wrapped is None:
            name = f"Alpha[{inner_class.__name__}]"
            wrapped = type(cls)(name, (Alpha,), {
                '_generic': Alpha,
                'inner_class': inner_class,
                'channels': inner_class.channels + (ALPHA_CHANNEL,),
                'format_type': inner_class.format_type,
                'angle_unit': inner_class.angle_unit,
                'valid_formats': inner_class.valid_formats,
                '__module__': __name__,
                '__qualname__': name,
            })
            Alpha._wrapped[inner_class] = wrapped
        return wrapped

    @classmethod
    def specialize(cls, format_type: Optional[ChannelFormat] = None,
                   angle_unit: Optional[AngleUnit] = None) -> type[Alpha]:
        if cls.inner_class is None:
            raise TypeError("Alpha needs an inner color class before a format, e.g. Alpha[Rgb]")
        return Alpha.wrap(cls.inner_class.specialize(format_type, angle_unit))

    def __class_getitem__(cls, item):
        if isinstance(item, type) and issubclass(item, ColorBase):
            return cls.wrap(item)
        return super().__class_getitem__(item)

    # ------------------ ACCESS ------------------
    @property
    def inner(self) -> ColorBase:
        return self._value[0]

    @property
    def alpha(self) -> Any:
        return self._value[1]

    def _flat(self) -> Tuple[Any, ...]:
        return self.inner._flat() + (self.alpha,)

    def _identity(self) -> Tuple[Any, ...]:
        return (Alpha, self.inner._identity())

    def _replace(self, values: Sequence[Any], target: Optional[type] = None) -> Alpha:
        target = target or type(self)
        inner = self.inner._replace(values[:-1], target.inner_class)
        return target(inner, values[-1])

    def _with_parts(self, inner: ColorBase, alpha: Any) -> Alpha:
        return type(self)(inner, alpha)

    def with_alpha(self, alpha: Any) -> Alpha:
        return self._with_parts(self.inner, alpha)

    def with_channel(self, name: str, value: Any) -> Alpha:
        if name == ALPHA_CHANNEL.name:
            return self.with_alpha(value)
        return self._with_parts(self.inner.with_channel(name, value), self.alpha)

    def to_tuple(self) -> Tuple[Any, ...]:
        return (self.inner.to_tuple(), self.alpha)

    @classmethod
    def from_tuple(cls, values: Tuple[Any, ...], **kwargs) -> Alpha:
        inner, alpha = values
        return cls(cls.inner_class.from_tuple(inner, **kwargs), alpha)

    def color_cast(self, format_type: Optional[ChannelFormat] = None,
                   angle_unit: Optional[AngleUnit] = None) -> Alpha:
        inner = self.inner.color_cast(format_type, angle_unit)
        alpha = cast(self.alpha, self.format_type, inner.format_type)
        return Alpha.wrap(type(inner))(inner, alpha)

    # ------------------ CONTRACTS ------------------
    def is_normalized(self) -> bool:
        return self.inner.is_normalized() and kinds.is_normalized(
            ALPHA_CHANNEL.kind, self.alpha, self.format_type)

    def normalize(self) -> Alpha:
        return self._with_parts(
            self.inner.normalize(),
            kinds.normalize(ALPHA_CHANNEL.kind, self.alpha, self.format_type),
        )

    def invert(self) -> Alpha:
        if not isinstance(self.inner, Invertible):
            raise TypeError(f"{type(self.inner).__name__} cannot be inverted")
        return self._with_parts(
            self.inner.invert(),
            kinds.invert(ALPHA_CHANNEL.kind, self.alpha, self.format_type),
        )

    def lerp(self, other: Alpha, pos: float) -> Alpha:
        self._check_compatible(other)
        return self._with_parts(
            self.inner.lerp(other.inner, pos),
            kinds.lerp(ALPHA_CHANNEL.kind, self.alpha, other.alpha, pos, self.format_type),
        )


def _with_alpha(self: ColorBase, alpha: Any) -> Alpha:
    """Return this color with an alpha channel attached."""
    return Alpha.wrap(type(self))(self, alpha)


ColorBase.with_alpha = _with_alpha

Rgba = Alpha[Rgb]
Hsva = Alpha[Hsv]
Hsla = Alpha[Hsl]
