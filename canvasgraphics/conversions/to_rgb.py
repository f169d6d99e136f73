import numpy as np
from numpy import ndarray as NDArray
from ..types.format_type import HUE_360, RGB8_MAX
from ..types.color_types import UnitRGB


def hsb_to_unit_rgb(h: float, s: float, b: float) -> UnitRGB:
    """
    Convert HSB (a.k.a. HSV) to RGB.

    Args:
        h: hue in degrees, 360 is treated as 0
        s: saturation in [0, 1]
        b: brightness in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    if s == 0:
        return (b, b, b)

    h6 = (h % HUE_360) / 60.0
    sector = int(h6) % 6
    f = h6 - int(h6)

    p = b * (1 - s)
    q = b * (1 - s * f)
    t = b * (1 - s * (1 - f))

    return [
        (b, t, p),
        (q, b, p),
        (p, b, t),
        (p, q, b),
        (t, p, b),
        (b, p, q),
    ][sector]


def np_hsb_to_unit_rgb(h: NDArray, s: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert HSB to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, [0,1] saturation
        b: array-like or scalar, [0,1] brightness

    Returns:
        rgb: array of shape (..., 3) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(h, s, b).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    b = np.broadcast_to(b, out_shape)

    h6 = (h % HUE_360) / 60.0
    sector = np.floor(h6).astype(int) % 6
    f = h6 - np.floor(h6)

    p = b * (1 - s)
    q = b * (1 - s * f)
    t = b * (1 - s * (1 - f))

    r = np.choose(sector, [b, q, p, p, t, b])
    g = np.choose(sector, [t, b, b, q, p, p])
    bl = np.choose(sector, [p, p, t, b, b, q])

    return np.stack([r, g, bl], axis=-1)


def unit_to_int(c: float) -> int:
    """Scale a [0, 1] channel to [0, 255]."""
    return int(round(max(0.0, min(1.0, c)) * RGB8_MAX))


def np_unit_to_int(c: NDArray) -> NDArray:
    scaled = np.clip(np.asarray(c, dtype=float), 0.0, 1.0) * RGB8_MAX
    return np.round(scaled).astype(np.uint8)
