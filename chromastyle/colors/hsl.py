from __future__ import annotations
from typing import Any, ClassVar, Tuple, TYPE_CHECKING

from boundednumbers import clamp01
from boundednumbers.functions import cyclic_wrap_float

from ..conversions import hsl_to_rgb8
from ..types.color_types import HSLTuple, HUE_360
from .color_base import ColorBase

if TYPE_CHECKING:
    from .rgb import RGBColor8


class HSLColor(ColorBase):
    """
    A color as hue (degrees), saturation and luminance.

    Hue wraps into ``[0, 360)``; saturation and luminance are clamped to
    ``[0, 1]``.

    >>> HSLColor(-30, 1.5, 0.5)
    HSLColor(330.0, 1.0, 0.5)
    """
    __slots__ = ()

    mode: ClassVar[str] = "hsl"

    @classmethod
    def _normalize(cls, channels: Tuple[Any, ...]) -> HSLTuple:
        h, s, l = (float(c) for c in channels)
        if not 0.0 <= h < HUE_360:
            h = float(cyclic_wrap_float(h, 0.0, HUE_360))
            # tiny negatives wrap to exactly 360.0 in floating point
            if h >= HUE_360:
                h = 0.0
        return h, float(clamp01(s)), float(clamp01(l))

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def luminance(self) -> float:
        return self._value[2]

    def to_rgb(self) -> RGBColor8:
        from .rgb import RGBColor8
        return RGBColor8(*hsl_to_rgb8(*self._value))
