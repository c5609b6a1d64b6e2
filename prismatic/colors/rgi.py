from typing import ClassVar, Tuple
from ..channel.kinds import Channel, ChannelKind
from ..types.format_type import FLOAT_FORMATS, ChannelFormat
from .color_base import ColorBase, Bounded, Lerp, Flatten


class Rgi(ColorBase, Bounded, Lerp, Flatten):
    """Red and green chromaticity plus mean intensity."""

    space: ClassVar[str] = "rgi"
    valid_formats: ClassVar[Tuple[ChannelFormat, ...]] = FLOAT_FORMATS
    channels: ClassVar[Tuple[Channel, ...]] = (
        Channel("red", ChannelKind.POS_NORMAL),
        Channel("green", ChannelKind.POS_NORMAL),
        Channel("intensity", ChannelKind.POS_NORMAL),
    )
