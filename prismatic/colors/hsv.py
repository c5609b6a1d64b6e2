from typing import ClassVar, Tuple
from ..channel.kinds import Channel, ChannelKind
from .polar import HueColor, HUE


class Hsv(HueColor):
    space: ClassVar[str] = "hsv"
    channels: ClassVar[Tuple[Channel, ...]] = (
        HUE,
        Channel("saturation", ChannelKind.POS_NORMAL),
        Channel("value", ChannelKind.POS_NORMAL),
    )
