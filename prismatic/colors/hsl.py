from typing import ClassVar, Tuple
from ..channel.kinds import Channel, ChannelKind
from .polar import HueColor, HUE


class Hsl(HueColor):
    space: ClassVar[str] = "hsl"
    channels: ClassVar[Tuple[Channel, ...]] = (
        HUE,
        Channel("saturation", ChannelKind.POS_NORMAL),
        Channel("lightness", ChannelKind.POS_NORMAL),
    )
