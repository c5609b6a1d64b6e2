from typing import ClassVar, Optional, Tuple
from ..channel.kinds import Channel, ChannelKind
from ..types.format_type import FLOAT_FORMATS, ChannelFormat, AngleUnit
from ..utils.default import DEFAULT_ANGLE_UNIT
from .color_base import ColorBase, Bounded, Invertible, Lerp, Flatten

HUE = Channel("hue", ChannelKind.ANGULAR)


class HueColor(ColorBase, Bounded, Invertible, Lerp, Flatten):
    """Base for the hue/two-component cylindrical RGB models."""

    valid_formats: ClassVar[Tuple[ChannelFormat, ...]] = FLOAT_FORMATS
    angle_unit: ClassVar[Optional[AngleUnit]] = DEFAULT_ANGLE_UNIT
