# No dependencies
from enum import Enum


class Channel(str, Enum):
    HUE = "hue"
    SATURATION = "saturation"
    BRIGHTNESS = "brightness"
    ALPHA = "alpha"


HUE_360 = 360.0
PERCENT_100 = 100.0

channel_periods = {
    Channel.HUE: HUE_360,
    Channel.SATURATION: PERCENT_100,
    Channel.BRIGHTNESS: PERCENT_100,
    Channel.ALPHA: PERCENT_100,
}

# Column order of an HSBA row
channel_order = (Channel.HUE, Channel.SATURATION, Channel.BRIGHTNESS, Channel.ALPHA)

RGB8_MAX = 255
