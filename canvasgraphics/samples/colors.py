from typing import Dict
from ..types.color_types import HSBAValue

# Basic palette (hue, saturation, brightness, alpha)
BLACK_HSBA: HSBAValue = (0.0, 0.0, 0.0, 100.0)
WHITE_HSBA: HSBAValue = (0.0, 0.0, 100.0, 100.0)
RED_HSBA: HSBAValue = (0.0, 80.0, 90.0, 100.0)
ORANGE_HSBA: HSBAValue = (30.0, 80.0, 90.0, 100.0)
YELLOW_HSBA: HSBAValue = (60.0, 80.0, 90.0, 100.0)
GREEN_HSBA: HSBAValue = (120.0, 80.0, 90.0, 100.0)
BLUE_HSBA: HSBAValue = (240.0, 80.0, 90.0, 100.0)
PURPLE_HSBA: HSBAValue = (270.0, 80.0, 90.0, 100.0)

# Gig poster palette
DEEP_ORANGE_HSBA: HSBAValue = (8.0, 78.0, 93.0, 100.0)
OFF_WHITE_HSBA: HSBAValue = (81.0, 5.0, 88.0, 100.0)
BRIGHT_YELLOW_HSBA: HSBAValue = (46.0, 71.0, 98.0, 100.0)

NAMED_COLORS: Dict[str, HSBAValue] = {
    "black": BLACK_HSBA,
    "white": WHITE_HSBA,
    "red": RED_HSBA,
    "orange": ORANGE_HSBA,
    "yellow": YELLOW_HSBA,
    "green": GREEN_HSBA,
    "blue": BLUE_HSBA,
    "purple": PURPLE_HSBA,
    "deep_orange": DEEP_ORANGE_HSBA,
    "off_white": OFF_WHITE_HSBA,
    "bright_yellow": BRIGHT_YELLOW_HSBA,
}


def normalize_color_name(name: str) -> str:
    """'Deep Orange', 'deep-orange' and 'deep_orange' all map to 'deep_orange'."""
    return "_".join(name.strip().lower().replace("-", " ").replace("_", " ").split())


def get_named_hsba(name: str) -> HSBAValue:
    key = normalize_color_name(name)
    if key not in NAMED_COLORS:
        raise ValueError(
            f"Unknown color name {name!r}; expected one of {sorted(NAMED_COLORS)}"
        )
    return NAMED_COLORS[key]


__all__ = [
    "BLACK_HSBA",
    "WHITE_HSBA",
    "RED_HSBA",
    "ORANGE_HSBA",
    "YELLOW_HSBA",
    "GREEN_HSBA",
    "BLUE_HSBA",
    "PURPLE_HSBA",
    "DEEP_ORANGE_HSBA",
    "OFF_WHITE_HSBA",
    "BRIGHT_YELLOW_HSBA",
    "NAMED_COLORS",
    "normalize_color_name",
    "get_named_hsba",
]
