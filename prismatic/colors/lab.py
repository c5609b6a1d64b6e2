from typing import ClassVar, Optional, Tuple
from ..channel.kinds import Channel, ChannelKind
from ..types.format_type import AngleUnit
from ..utils.default import DEFAULT_ANGLE_UNIT
from .xyz import FreeColor
from .color_base import Bounded


class Lab(FreeColor):
    """CIE L*a*b*; the reference white is chosen at conversion time."""

    space: ClassVar[str] = "lab"
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("l", ChannelKind.FREE),
        Channel("a", ChannelKind.FREE),
        Channel("b", ChannelKind.FREE),
    )


class Luv(FreeColor):
    """CIE L*u*v*."""

    space: ClassVar[str] = "luv"
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("l", ChannelKind.FREE),
        Channel("u", ChannelKind.FREE),
        Channel("v", ChannelKind.FREE),
    )


class _Lch(FreeColor):
    angle_unit: ClassVar[Optional[AngleUnit]] = DEFAULT_ANGLE_UNIT
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("l", ChannelKind.FREE),
        Channel("chroma", ChannelKind.FREE),
        Channel("hue", ChannelKind.ANGULAR),
    )

    # the hue still needs wrapping
    is_normalized = Bounded.is_normalized
    normalize = Bounded.normalize


class Lchab(_Lch):
    """Cylindrical form of Lab."""

    space: ClassVar[str] = "lchab"


class Lchuv(_Lch):
    """Cylindrical form of Luv."""

    space: ClassVar[str] = "lchuv"
