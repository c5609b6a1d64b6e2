from typing import ClassVar, Tuple
from ..channel.kinds import Channel, ChannelKind
from ..types.format_type import FLOAT_FORMATS, ChannelFormat
from .color_base import ColorBase, Bounded, Lerp, Flatten, Homogeneous


class FreeColor(ColorBase, Bounded, Lerp, Flatten):
    """Base for spaces without channel bounds; always normalized."""

    valid_formats: ClassVar[Tuple[ChannelFormat, ...]] = FLOAT_FORMATS

    def is_normalized(self) -> bool:
        return True

    def normalize(self):
        return self


class Xyz(FreeColor, Homogeneous):
    """CIE 1931 XYZ tristimulus values."""

    space: ClassVar[str] = "xyz"
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("x", ChannelKind.FREE),
        Channel("y", ChannelKind.FREE),
        Channel("z", ChannelKind.FREE),
    )


class Lms(FreeColor, Homogeneous):
    """Cone response space (long, medium, short)."""

    space: ClassVar[str] = "lms"
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("l", ChannelKind.FREE),
        Channel("m", ChannelKind.FREE),
        Channel("s", ChannelKind.FREE),
    )
