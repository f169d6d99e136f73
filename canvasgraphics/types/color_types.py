from __future__ import annotations
from typing import Literal, Tuple, Union
from .format_type import Channel

Scalar = int | float
HSBValue = Tuple[float, float, float]
HSBAValue = Tuple[float, float, float, float]
UnitRGB = Tuple[float, float, float]
UnitRGBA = Tuple[float, float, float, float]
RGBA8 = Tuple[int, int, int, int]
ChannelName = Literal["hue", "saturation", "brightness", "alpha"]
ChannelLike = Union[Channel, ChannelName]


def to_channel(channel: ChannelLike) -> Channel:
    """
    Resolve a channel name or enum member.

    Raises:
        ValueError: if the name is not one of the four HSBA channels.
    """
    if isinstance(channel, Channel):
        return channel
    try:
        return Channel(str(channel).lower())
    except ValueError:
        raise ValueError(f"Unknown color channel: {channel!r}") from None
