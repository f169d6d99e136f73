"""
canvasgraphics Color Classes
============================

``Color`` holds one HSBA color whose channels are always in range:

- hue: degrees over [0, 360]
- saturation, brightness, alpha: percentages over [0, 100]

Out-of-range inputs are coerced, never rejected. Negative values become 0
and values past the top of the range wrap around:

>>> from canvasgraphics.colors import Color
>>> Color(hue=400, saturation=-5, brightness=150, alpha=50).value
(40.0, 0.0, 50.0, 50.0)
>>> Color(hue=-10, saturation=0, brightness=0, alpha=100).hue
0.0

The fractional forms used by a renderer are available as
``translated_hue``, ``translated_saturation`` and so on, or by name via
``Color.fraction("hue")``.
"""

from .color import Color

__all__ = ['Color']
