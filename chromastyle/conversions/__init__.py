"""
Chromastyle Color Space Conversions
===================================

RGB ↔ HSL conversions with scalar and vectorized (numpy) implementations.

Unit functions work on floats in [0, 1] (hue in degrees). The 8-bit wrappers
scale to and from integer channels, rounding half up and clamping to
[0, 255] so floating-point drift never escapes the channel range.

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
    np_unit_rgb_to_hsl(r, g, b)
    rgb8_to_hsl(r, g, b)
    np_rgb8_to_hsl(rgb)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_unit_rgb(h, s, l)
    hsl_to_rgb8(h, s, l)
    np_hsl_to_rgb8(hsl)

Examples
--------
>>> from chromastyle.conversions import rgb8_to_hsl, hsl_to_rgb8
>>> rgb8_to_hsl(255, 0, 0)
(0.0, 1.0, 0.5)
>>> hsl_to_rgb8(240.0, 1.0, 0.5)
(0, 0, 255)
"""

from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb, normalize_hue
from .wrapper import (
    CHANNEL_MAX,
    unit_to_channel,
    np_unit_to_channel,
    rgb8_to_hsl,
    hsl_to_rgb8,
    np_rgb8_to_hsl,
    np_hsl_to_rgb8,
)

__all__ = [
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'normalize_hue',
    'CHANNEL_MAX',
    'unit_to_channel',
    'np_unit_to_channel',
    'rgb8_to_hsl',
    'hsl_to_rgb8',
    'np_rgb8_to_hsl',
    'np_hsl_to_rgb8',
]
