from typing import ClassVar, Tuple
from ..channel.kinds import Channel, ChannelKind
from .color_base import ColorBase, Bounded, Invertible, Lerp, Flatten, Homogeneous


class Rgb(ColorBase, Bounded, Invertible, Lerp, Flatten, Homogeneous):
    """Device RGB; every integer and float format is supported."""

    space: ClassVar[str] = "rgb"
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("red", ChannelKind.POS_NORMAL),
        Channel("green", ChannelKind.POS_NORMAL),
        Channel("blue", ChannelKind.POS_NORMAL),
    )
