"""
canvasgraphics Color Conversions
================================

HSB → RGB conversion for handing colors to a renderer.

Conversion Functions
-------------------
    hsb_to_unit_rgb(h, s, b)
        Scalar HSB to RGB conversion (hue in degrees, s/b in [0, 1])
    np_hsb_to_unit_rgb(h, s, b)
        Vectorized HSB to RGB conversion, returns shape (..., 3)
    unit_to_int(c) / np_unit_to_int(c)
        Scale [0, 1] channels to 8-bit integers

Examples
--------
>>> from canvasgraphics.conversions import hsb_to_unit_rgb
>>> hsb_to_unit_rgb(120.0, 1.0, 1.0)
(0.0, 1.0, 0.0)
"""

from .to_rgb import (
    hsb_to_unit_rgb,
    np_hsb_to_unit_rgb,
    unit_to_int,
    np_unit_to_int,
)

__all__ = [
    'hsb_to_unit_rgb',
    'np_hsb_to_unit_rgb',
    'unit_to_int',
    'np_unit_to_int',
]
