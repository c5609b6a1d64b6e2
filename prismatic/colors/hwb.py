from typing import ClassVar, Tuple
from ..channel.kinds import Channel, ChannelKind
from ..channel.scalar import sum_tolerance
from .polar import HueColor, HUE


class Hwb(HueColor):
    """
    Hue, whiteness, blackness.

    A normalized color also satisfies ``whiteness + blackness <= 1``;
    ``normalize`` scales the pair down proportionally when it does not.
    """

    space: ClassVar[str] = "hwb"
    channels: ClassVar[Tuple[Channel, ...]] = (
        HUE,
        Channel("whiteness", ChannelKind.POS_NORMAL),
        Channel("blackness", ChannelKind.POS_NORMAL),
    )

    def is_normalized(self) -> bool:
        return (super().is_normalized()
                and self.whiteness + self.blackness <= 1.0 + sum_tolerance(self.format_type))

    def normalize(self) -> "Hwb":
        clamped = super().normalize()
        total = clamped.whiteness + clamped.blackness
        if total <= 1.0 + sum_tolerance(self.format_type):
            return clamped
        return clamped._replace([clamped.hue, clamped.whiteness / total, clamped.blackness / total])
