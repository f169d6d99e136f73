from __future__ import annotations
import logging
from typing import ClassVar
from ..conversions import hsb_to_unit_rgb, unit_to_int
from ..samples.colors import get_named_hsba
from ..types.color_types import (
    ChannelLike, HSBAValue, RGBA8, Scalar, UnitRGB, UnitRGBA, to_channel,
)
from ..types.format_type import Channel, HUE_360, PERCENT_100, channel_order
from ..utils.num_utils import rationalize, validate_real

logger = logging.getLogger(__name__)


class Color:
    """
    A color in hue/saturation/brightness/alpha space.

    Hue is in degrees over [0, 360], the other channels are percentages over
    [0, 100]. Any finite number is accepted and brought into range, both in
    ``__init__`` and on every later assignment:

    >>> c = Color(hue=400, saturation=-5, brightness=150, alpha=50)
    >>> c.value
    (40.0, 0.0, 50.0, 50.0)
    >>> c.hue = -10
    >>> c.hue
    0.0

    Each channel also has a fractional form (``translated_hue`` etc.) in
    [0, 1], kept in sync with the canonical value. That is what a renderer
    consumes.
    """
    __slots__ = (
        '_hue', '_saturation', '_brightness', '_alpha',
        '_translated_hue', '_translated_saturation',
        '_translated_brightness', '_translated_alpha',
    )

    hue_period:     ClassVar[float] = HUE_360
    percent_period: ClassVar[float] = PERCENT_100

    def __init__(
        self,
        hue: Scalar,
        saturation: Scalar,
        brightness: Scalar,
        alpha: Scalar = PERCENT_100,
    ) -> None:
        self._assign(Channel.HUE, hue)
        self._assign(Channel.SATURATION, saturation)
        self._assign(Channel.BRIGHTNESS, brightness)
        self._assign(Channel.ALPHA, alpha)

    @classmethod
    def named(cls, name: str) -> Color:
        """Return a new instance of a named color, e.g. ``Color.named("deep orange")``."""
        return cls(*get_named_hsba(name))

    @classmethod
    def period_of(cls, channel: ChannelLike) -> float:
        return cls.hue_period if to_channel(channel) is Channel.HUE else cls.percent_period

    def _assign(self, channel: Channel, raw: object) -> None:
        period = self.period_of(channel)
        value = validate_real(raw, channel.value)
        normalized = rationalize(value, period)
        if normalized != value:
            logger.debug("%s out of range, coerced to %r", channel.value, normalized)
        setattr(self, f"_{channel.value}", normalized)
        setattr(self, f"_translated_{channel.value}", normalized / period)

    # ------------------ CHANNELS ------------------
    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, value: Scalar) -> None:
        self._assign(Channel.HUE, value)

    @property
    def saturation(self) -> float:
        return self._saturation

    @saturation.setter
    def saturation(self, value: Scalar) -> None:
        self._assign(Channel.SATURATION, value)

    @property
    def brightness(self) -> float:
        return self._brightness

    @brightness.setter
    def brightness(self, value: Scalar) -> None:
        self._assign(Channel.BRIGHTNESS, value)

    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: Scalar) -> None:
        self._assign(Channel.ALPHA, value)

    def set(self, channel: ChannelLike, value: Scalar) -> None:
        """Assign one channel by name, normalizing it like the property setters do."""
        self._assign(to_channel(channel), value)

    # ------------------ FRACTIONAL FORMS ------------------
    @property
    def translated_hue(self) -> float:
        return self._translated_hue

    @property
    def translated_saturation(self) -> float:
        return self._translated_saturation

    @property
    def translated_brightness(self) -> float:
        return self._translated_brightness

    @property
    def translated_alpha(self) -> float:
        return self._translated_alpha

    def fraction(self, channel: ChannelLike) -> float:
        """Canonical value of ``channel`` divided by its range width."""
        return getattr(self, f"_translated_{to_channel(channel).value}")

    @property
    def value(self) -> HSBAValue:
        return (self._hue, self._saturation, self._brightness, self._alpha)

    @property
    def unit_values(self) -> HSBAValue:
        return tuple(self.fraction(c) for c in channel_order)  # type: ignore

    # ------------------ RENDERING ------------------
    def to_unit_rgb(self) -> UnitRGB:
        return hsb_to_unit_rgb(
            self._hue, self._translated_saturation, self._translated_brightness
        )

    def to_unit_rgba(self) -> UnitRGBA:
        return self.to_unit_rgb() + (self._translated_alpha,)

    def to_rgba8(self) -> RGBA8:
        """RGBA with every channel scaled to 0-255."""
        return tuple(unit_to_int(c) for c in self.to_unit_rgba())  # type: ignore

    # ------------------ COPIES ------------------
    def copy(self) -> Color:
        return self.__class__(*self.value)

    def with_alpha(self, alpha: Scalar) -> Color:
        """Return a new instance with a different alpha; this one is left unchanged."""
        new = self.copy()
        new.alpha = alpha
        return new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        h, s, b, a = self.value
        return (
            f"{self.__class__.__name__}(hue={h!r}, saturation={s!r}, "
            f"brightness={b!r}, alpha={a!r})"
        )
