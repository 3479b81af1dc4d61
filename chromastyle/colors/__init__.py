"""
Chromastyle Color Classes
=========================

Immutable scalar color value types.

- ``RGBColor8``: three 8-bit channels, clamped to [0, 255]
- ``HSLColor``: hue in degrees [0, 360), saturation and luminance in [0, 1]

Both compare and hash by value and refuse attribute assignment once built.

>>> from chromastyle.colors import RGBColor8
>>> red = RGBColor8(255, 0, 0)
>>> red.to_hsl()
HSLColor(0.0, 1.0, 0.5)
>>> red.to_hsl().to_rgb() == red
True
"""

from .color_base import ColorBase
from .rgb import RGBColor8
from .hsl import HSLColor

__all__ = ['ColorBase', 'RGBColor8', 'HSLColor']
