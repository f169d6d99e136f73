"""
Range normalization for HSBA channels.

A channel with width ``period`` is brought into range like this:

- negative values (and -0.0) collapse to 0 (they are *not* wrapped)
- values above ``period`` wrap with ``value % period``
- anything in ``[0, period]`` is kept as is, ``period`` included

The asymmetry is inherited behavior that existing palettes depend on,
e.g. a hue of -10 becomes 0 rather than 350.
"""
from __future__ import annotations
import math
from fractions import Fraction
from numbers import Integral, Real
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import cyclic_wrap_float
from ..types.color_types import Scalar
from ..types.format_type import HUE_360, PERCENT_100


def validate_real(value: object, name: str = "value") -> Scalar:
    """
    Check that ``value`` is a usable channel input.

    Integers come back as ``int`` so arbitrarily large ones can still be
    reduced exactly; everything else comes back as a finite ``float``.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    if isinstance(value, Integral):
        return int(value)
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"{name} must be finite, got {result}")
    return result


def rationalize(value: Scalar, period: float) -> float:
    if value <= 0:
        return 0.0
    if value > period:
        if isinstance(value, int):
            # exact; the int may not fit in a float
            return float(Fraction(value) % Fraction(period))
        return cyclic_wrap_float(value, 0.0, period)
    return float(value)


def rationalize_hue(value: float) -> float:
    """Translate degrees to a single positive rotation."""
    return rationalize(value, HUE_360)


def rationalize_percentage(value: float) -> float:
    return rationalize(value, PERCENT_100)


def np_rationalize(values: NDArray, period: float | NDArray) -> NDArray:
    """
    Vectorized :func:`rationalize`.

    Args:
        values: array-like of raw channel values
        period: scalar width, or an array broadcasting against ``values``
            (e.g. one width per HSBA column)

    Returns:
        float64 array of the same shape with every element in range
    """
    values = np.asarray(values, dtype=np.float64)
    period = np.asarray(period, dtype=np.float64)
    wrap = bound_type_to_np_function[BoundType.CYCLIC]
    wrapped = wrap(values, 0.0, period)
    return np.where(values <= 0, 0.0, np.where(values > period, wrapped, values))
