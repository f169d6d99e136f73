from __future__ import annotations
from typing import Iterable, Tuple
import numpy as np
from numpy import ndarray
from .colors.color import Color
from .conversions import np_hsb_to_unit_rgb, np_unit_to_int
from .types.format_type import PERCENT_100, channel_order, channel_periods
from .utils.num_utils import np_rationalize

HSBA_PERIODS = np.array([channel_periods[c] for c in channel_order], dtype=np.float64)


class ColorArr:
    """
    An immutable batch of HSBA colors backed by a ``(..., 4)`` float array.

    Every column is normalized with the same rule as :class:`Color`, so for
    float-representable inputs ``ColorArr([[h, s, b, a]]).color_at(0) == Color(h, s, b, a)``.
    Rows with three columns get an opaque alpha of 100.

    >>> arr = ColorArr([[400, -5, 150], [120, 80, 90]])
    >>> arr.value[0].tolist()
    [40.0, 0.0, 50.0, 100.0]
    """
    __slots__ = ('_value', '_is_frozen')  # no new attributes

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value) -> None:
        arr = np.asarray(value)

        if not (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)):
            raise TypeError(
                f"{self.__class__.__name__} expects integer or float values, got dtype {arr.dtype}"
            )
        arr = arr.astype(np.float64)

        if arr.ndim == 0 or arr.shape[-1] not in (3, 4):
            raise ValueError(
                f"{self.__class__.__name__} expects last dimension to be 3 or 4, got shape {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise ValueError(f"{self.__class__.__name__} values must be finite")

        if arr.shape[-1] == 3:
            alpha = np.full(arr.shape[:-1] + (1,), PERCENT_100)
            arr = np.concatenate([arr, alpha], axis=-1)

        arr = np_rationalize(arr, HSBA_PERIODS)
        arr.flags.writeable = False
        self._value = arr

        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_colors(cls, colors: Iterable[Color]) -> ColorArr:
        rows = [c.value for c in colors]
        if not rows:
            raise ValueError("from_colors needs at least one color")
        return cls(np.array(rows, dtype=np.float64))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ndarray:
        return self._value

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape without the channel axis."""
        return self._value.shape[:-1]

    @property
    def unit_values(self) -> ndarray:
        return self._value / HSBA_PERIODS

    def __len__(self) -> int:
        if self._value.ndim == 1:
            raise TypeError(f"len() of a single-row {self.__class__.__name__}")
        return self._value.shape[0]

    def color_at(self, index) -> Color:
        """Return the row at ``index`` as a new mutable :class:`Color`."""
        row = self._value[index]
        if row.shape != (4,):
            raise IndexError(f"index {index!r} does not select a single color")
        return Color(*row.tolist())

    def to_unit_rgba(self) -> ndarray:
        unit = self.unit_values
        rgb = np_hsb_to_unit_rgb(self._value[..., 0], unit[..., 1], unit[..., 2])
        return np.concatenate([rgb, unit[..., 3:]], axis=-1)

    def to_rgba8(self) -> ndarray:
        """uint8 RGBA, ready for ``PIL.Image.fromarray``."""
        return np_unit_to_int(self.to_unit_rgba())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(shape={self.shape})"
