"""Basic canvasgraphics usage examples.

Run directly with:
    python examples/basic_usage.py [swatch.png]
"""
import sys

import numpy as np

from canvasgraphics import Color, ColorArr, NAMED_COLORS


def demonstrate_colors() -> None:
    # Out-of-range inputs are coerced on construction and on assignment.
    accent = Color(hue=400, saturation=-5, brightness=150, alpha=50)
    print("Normalized HSBA:", accent.value)
    print("Fractional HSBA:", accent.unit_values)

    accent.hue = 725
    print("Hue after wrapping 725:", accent.hue)

    deep_orange = Color.named("deep orange")
    print("Deep orange as RGBA8:", deep_orange.to_rgba8())
    print("Half transparent:", deep_orange.with_alpha(50).to_rgba8())


def palette_swatch(output_path=None, cell: int = 40):
    """Render every named color as a horizontal strip of squares."""
    from PIL import Image

    palette = ColorArr.from_colors(Color.named(name) for name in NAMED_COLORS)
    strip = palette.to_rgba8()[np.newaxis, :, :]
    pixels = np.repeat(np.repeat(strip, cell, axis=0), cell, axis=1)

    img = Image.fromarray(pixels)
    if output_path:
        img.save(output_path)
    return img


if __name__ == "__main__":
    demonstrate_colors()
    swatch = palette_swatch(sys.argv[1] if len(sys.argv) > 1 else None)
    print("Swatch size:", swatch.size)
