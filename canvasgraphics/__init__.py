"""canvasgraphics: HSBA colors for a drawing canvas."""

from .colors.color import Color
from .color_arr import ColorArr
from .conversions import (
    hsb_to_unit_rgb,
    np_hsb_to_unit_rgb,
    unit_to_int,
    np_unit_to_int,
)
from .samples.colors import NAMED_COLORS
from .types.format_type import Channel
from .utils.num_utils import (
    rationalize,
    rationalize_hue,
    rationalize_percentage,
    np_rationalize,
)

__version__ = "1.0.0"

__all__ = [
    "Color",
    "ColorArr",
    "Channel",
    "NAMED_COLORS",
    "hsb_to_unit_rgb",
    "np_hsb_to_unit_rgb",
    "unit_to_int",
    "np_unit_to_int",
    "rationalize",
    "rationalize_hue",
    "rationalize_percentage",
    "np_rationalize",
    "__version__",
]
