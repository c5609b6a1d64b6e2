from __future__ import annotations
from abc import ABC
from typing import Any, Callable, ClassVar, Dict, Iterator, Optional, Sequence, Tuple, Self
import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp

from ..channel import kinds
from ..channel.cast import cast_channel
from ..channel.kinds import Channel, ChannelKind
from ..channel.scalar import coerce_scalar, zero
from ..errors import InvariantViolation
from ..types.format_type import ChannelFormat, AngleUnit, ALL_FORMATS, default_format_dtypes
from ..utils.default import DEFAULT_FORMAT, DEFAULT_EPSILON, value_or_default


def channel_property(index: int, doc: Optional[str] = None) -> property:
    """Read-only accessor for the channel stored at ``index``."""
    def getter(self: ColorBase):
        return self._flat()[index]
    return property(getter, doc=doc)


def _channel_setter(name: str) -> Callable[..., Any]:
    def setter(self: ColorBase, value):
        return self.with_channel(name, value)
    setter.__name__ = f"with_{name}"
    setter.__doc__ = f"Return a copy of this color with ``{name}`` replaced."
    return setter


class ColorBase:
    __slots__ = ('_value',)

    space:          ClassVar[str]
    channels:       ClassVar[Tuple[Channel, ...]] = ()
    num_channels:   ClassVar[int] = 0
    format_type:    ClassVar[ChannelFormat] = DEFAULT_FORMAT
    angle_unit:     ClassVar[Optional[AngleUnit]] = None
    valid_formats:  ClassVar[Tuple[ChannelFormat, ...]] = ALL_FORMATS
    has_hue:        ClassVar[bool] = False
    _generic:       ClassVar[type]
    _specializations: ClassVar[Dict[Any, type]]
    _is_frozen: bool = False   # class-level default, shadowed per instance once frozen

    # injected by the alpha and conversion modules
    with_alpha: Callable[..., ColorBase]
    convert: Callable[..., ColorBase]
    try_convert: Callable[..., Optional[ColorBase]]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if '_generic' not in cls.__dict__:
            cls._generic = cls
            cls._specializations = {}
        if 'channels' in cls.__dict__:
            cls.num_channels = len(cls.channels)
            cls.has_hue = any(ch.kind is ChannelKind.ANGULAR for ch in cls.channels)
            for index, channel in enumerate(cls.channels):
                if not hasattr(cls, channel.name):
                    setattr(cls, channel.name, channel_property(index))
                setter = f"with_{channel.name}"
                if not hasattr(cls, setter):
                    setattr(cls, setter, _channel_setter(channel.name))

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Any) -> None:
        if len(values) != self.num_channels:
            raise TypeError(
                f"{type(self).__name__} expects {self.num_channels} channels, got {len(values)}"
            )
        self._value = tuple(coerce_scalar(v, self.format_type) for v in values)
        self._validate()
        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _validate(self) -> None:
        """Hook for space-specific construction invariants."""

    # ------------------ SPECIALIZATION ------------------
    @classmethod
    def specialize(cls, format_type: Optional[ChannelFormat] = None,
                   angle_unit: Optional[AngleUnit] = None) -> type[Self]:
        """Return the class of this space stored as ``format_type`` (and ``angle_unit``)."""
        base = cls._generic
        fmt = ChannelFormat(value_or_default(format_type, cls.format_type))
        if fmt not in base.valid_formats:
            raise TypeError(f"{base.__name__} does not support {fmt.value} channels")
        if base.has_hue:
            unit = AngleUnit(value_or_default(angle_unit, cls.angle_unit))
        elif angle_unit is not None:
            raise TypeError(f"{base.__name__} has no angular channel")
        else:
            unit = None

        if fmt is base.format_type and unit is base.angle_unit:
            return base
        key = (fmt, unit)
        specialized = base._specializations.get(key)
        if specialized is None:
            suffix = fmt.value if unit is None else f"{fmt.value}, {unit.value}"
            name = f"{base.__name__}[{suffix}]"
            specialized = type(base)(name, (base,), {
                '_generic': base,
                'format_type': fmt,
                'angle_unit': unit,
                '__module__': base.__module__,
                '__qualname__': name,
            })
            base._specializations[key] = specialized
        return specialized

    def __class_getitem__(cls, item):
        if isinstance(item, tuple):
            return cls.specialize(*item)
        return cls.specialize(item)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def values(self) -> Tuple[Any, ...]:
        return self._flat()

    def _flat(self) -> Tuple[Any, ...]:
        return self._value

    def _pairs(self) -> Iterator[Tuple[Channel, Any]]:
        return zip(self.channels, self._flat())

    def _identity(self) -> Tuple[Any, ...]:
        return (self._generic, self.format_type, self.angle_unit)

    def _replace(self, values: Sequence[Any], target: Optional[type] = None) -> Self:
        """Build a color of the same space (or ``target``) carrying over non-channel state."""
        return (target or type(self))(*values)

    def _check_compatible(self, other: Any) -> None:
        if not isinstance(other, ColorBase) or self._identity() != other._identity():
            raise TypeError(
                f"{type(self).__name__} cannot be combined with {type(other).__name__}"
            )

    @classmethod
    def _index(cls, name: str) -> int:
        for index, channel in enumerate(cls.channels):
            if channel.name == name:
                return index
        raise AttributeError(f"{cls.__name__} has no channel named {name!r}")

    # ------------------ TUPLE CONVERSION ------------------
    def to_tuple(self) -> Tuple[Any, ...]:
        return self._flat()

    @classmethod
    def from_tuple(cls, values: Tuple[Any, ...], **kwargs) -> Self:
        return cls(*values, **kwargs)

    @classmethod
    def default(cls, **kwargs) -> Self:
        return cls(*(zero(cls.format_type) for _ in range(cls.num_channels)), **kwargs)

    def with_channel(self, name: str, value: Any) -> Self:
        values = list(self._flat())
        values[self._index(name)] = value
        return self._replace(values)

    def color_cast(self, format_type: Optional[ChannelFormat] = None,
                   angle_unit: Optional[AngleUnit] = None) -> ColorBase:
        """Cast every channel into another format (and angle unit)."""
        target = self.specialize(format_type, angle_unit)
        values = [
            cast_channel(ch.kind, v, self.format_type, target.format_type,
                         self.angle_unit, target.angle_unit)
            for ch, v in self._pairs()
        ]
        return self._replace(values, target)

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase) or self._generic is not other._generic:
            return NotImplemented
        return self._identity() == other._identity() and self._flat() == other._flat()

    def __hash__(self) -> int:
        return hash((self._identity(), self._flat()))

    def approx_eq(self, other: ColorBase, epsilon: float = DEFAULT_EPSILON) -> bool:
        """Equality to a fixed precision; hues compare around the circle."""
        if not isinstance(other, ColorBase) or self._identity() != other._identity():
            return False
        left = np.asarray(self._flat(), dtype=np.float64)
        right = np.asarray(other._flat(), dtype=np.float64)
        diff = np.abs(left - right)
        if self.has_hue:
            period = self.angle_unit.period
            angular = np.array([ch.kind is ChannelKind.ANGULAR for ch in self.channels])
            diff = np.where(angular, np.minimum(diff, period - diff), diff)
        return bool(np.all(diff <= epsilon))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self._flat())})"


class Bounded(ABC):
    """Mixin for colors whose channels have bounds."""

    channels: ClassVar[Tuple[Channel, ...]]
    format_type: ClassVar[ChannelFormat]
    angle_unit: ClassVar[Optional[AngleUnit]]

    def is_normalized(self) -> bool:
        return all(
            kinds.is_normalized(ch.kind, v, self.format_type, self.angle_unit)
            for ch, v in self._pairs()
        )

    def normalize(self) -> Self:
        """Clamp bounded channels and wrap angular ones. Idempotent."""
        return self._replace([
            kinds.normalize(ch.kind, v, self.format_type, self.angle_unit)
            for ch, v in self._pairs()
        ])


class Invertible(ABC):
    """Mixin for colors with a well-defined inverse (``min + max - v`` per channel)."""

    channels: ClassVar[Tuple[Channel, ...]]
    format_type: ClassVar[ChannelFormat]
    angle_unit: ClassVar[Optional[AngleUnit]]

    def invert(self) -> Self:
        return self._replace([
            kinds.invert(ch.kind, v, self.format_type, self.angle_unit)
            for ch, v in self._pairs()
        ])


class Lerp(ABC):
    """Mixin for linear interpolation between two colors of the same space."""

    channels: ClassVar[Tuple[Channel, ...]]
    format_type: ClassVar[ChannelFormat]
    angle_unit: ClassVar[Optional[AngleUnit]]

    def lerp(self, other: Self, pos: float) -> Self:
        """
        Interpolate toward ``other``.

        ``pos`` is not clamped; values outside ``[0, 1]`` extrapolate.
        Integer channels truncate toward zero and saturate, angular channels
        travel along the shorter arc.
        """
        self._check_compatible(other)
        return self._replace([
            kinds.lerp(ch.kind, left, right, pos, self.format_type, self.angle_unit)
            for ch, left, right in zip(self.channels, self._flat(), other._flat())
        ])


class Flatten(ABC):
    """Mixin for interchange with flat channel buffers."""

    num_channels: ClassVar[int]
    format_type: ClassVar[ChannelFormat]

    def as_slice(self) -> list:
        return list(self._flat())

    @classmethod
    def from_slice(cls, values: Sequence[Any], **kwargs) -> Self:
        if len(values) < cls.num_channels:
            raise InvariantViolation(
                f"{cls.__name__} needs {cls.num_channels} channel values, got {len(values)}"
            )
        return cls(*values[:cls.num_channels], **kwargs)

    def as_array(self) -> ndarray:
        return np.array(self._flat(), dtype=default_format_dtypes[self.format_type])

    @classmethod
    def from_array(cls, arr: ndarray, **kwargs) -> Self:
        arr = np.asarray(arr)
        if arr.ndim != 1:
            raise ValueError(f"{cls.__name__} expects a 1-D channel array, got shape {arr.shape}")
        return cls.from_slice(arr.tolist(), **kwargs)


class Homogeneous(ABC):
    """Mixin for colors whose channels all share one kind."""

    num_channels: ClassVar[int]

    @classmethod
    def broadcast(cls, value: Any, **kwargs) -> Self:
        return cls(*([value] * cls.num_channels), **kwargs)

    def clamp(self, lo: Any, hi: Any) -> Self:
        return self._replace([clamp(v, lo, hi) for v in self._flat()])


def build_registry(*classes: type[ColorBase]) -> Dict[str, type[ColorBase]]:
    return {cls.space: cls for cls in classes}
