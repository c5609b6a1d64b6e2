from typing import ClassVar, Tuple
from ..channel.kinds import Channel, ChannelKind
from .polar import HueColor, HUE


class Hsi(HueColor):
    """Hue, saturation, intensity with the geometric (arccos) hue."""

    space: ClassVar[str] = "hsi"
    channels: ClassVar[Tuple[Channel, ...]] = (
        HUE,
        Channel("saturation", ChannelKind.POS_NORMAL),
        Channel("intensity", ChannelKind.POS_NORMAL),
    )
