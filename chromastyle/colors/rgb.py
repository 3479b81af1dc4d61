from __future__ import annotations
from typing import Any, ClassVar, Tuple, TYPE_CHECKING

from boundednumbers import clamp

from ..conversions import CHANNEL_MAX, rgb8_to_hsl, unit_to_channel
from ..types.color_types import RGBTuple
from .color_base import ColorBase

if TYPE_CHECKING:
    from .hsl import HSLColor


class RGBColor8(ColorBase):
    """
    An 8-bit per channel RGB color.

    Channels are coerced to ``int`` and clamped to ``[0, 255]``.

    >>> RGBColor8(255, 128, 300)
    RGBColor8(255, 128, 255)
    """
    __slots__ = ()

    mode: ClassVar[str] = "rgb"
    maxima: ClassVar[RGBTuple] = (CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)

    @classmethod
    def _normalize(cls, channels: Tuple[Any, ...]) -> RGBTuple:
        r, g, b = (int(clamp(int(round(c)), 0, m)) for c, m in zip(channels, cls.maxima))
        return r, g, b

    @classmethod
    def from_unit(cls, r: float, g: float, b: float) -> RGBColor8:
        """Build from unit floats, rounding half up."""
        return cls(unit_to_channel(r), unit_to_channel(g), unit_to_channel(b))

    @classmethod
    def from_hex(cls, text: str) -> RGBColor8:
        """Parse ``#RRGGBB``, ``RRGGBB`` or the short ``#RGB`` form."""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        if len(digits) != 6:
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        except ValueError as exc:
            raise ValueError(f"Invalid hex color: {text!r}") from exc

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def unit_values(self) -> Tuple[float, float, float]:
        return tuple(c / CHANNEL_MAX for c in self._value)  # type: ignore[return-value]

    @property
    def hex(self) -> str:
        return "#{:02X}{:02X}{:02X}".format(*self._value)

    def to_hsl(self) -> HSLColor:
        from .hsl import HSLColor
        return HSLColor(*rgb8_to_hsl(*self._value))
