import math
import numpy as np
from boundednumbers import clamp

from ..types.color_types import HSLTuple, RGBTuple
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb

CHANNEL_MAX = 255


def unit_to_channel(value: float) -> int:
    """Scale a unit float to an 8-bit channel, rounding half up and clamping."""
    return int(clamp(math.floor(value * CHANNEL_MAX + 0.5), 0, CHANNEL_MAX))


def np_unit_to_channel(values: np.ndarray) -> np.ndarray:
    """Vectorized :func:`unit_to_channel`."""
    scaled = np.floor(np.asarray(values, dtype=float) * CHANNEL_MAX + 0.5)
    return np.clip(scaled, 0, CHANNEL_MAX).astype(np.int64)


def rgb8_to_hsl(r: int, g: int, b: int) -> HSLTuple:
    """Convert 8-bit RGB channels to (hue, saturation, luminance)."""
    return unit_rgb_to_hsl(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)


def hsl_to_rgb8(h: float, s: float, l: float) -> RGBTuple:
    """Convert (hue, saturation, luminance) to 8-bit RGB channels."""
    r, g, b = hsl_to_unit_rgb(h, s, l)
    return unit_to_channel(r), unit_to_channel(g), unit_to_channel(b)


def np_rgb8_to_hsl(rgb: np.ndarray) -> np.ndarray:
    """Vectorized: (..., 3) 8-bit RGB array to (..., 3) HSL array."""
    unit = np.asarray(rgb, dtype=float) / CHANNEL_MAX
    return np_unit_rgb_to_hsl(unit[..., 0], unit[..., 1], unit[..., 2])


def np_hsl_to_rgb8(hsl: np.ndarray) -> np.ndarray:
    """Vectorized: (..., 3) HSL array to (..., 3) 8-bit RGB integer array."""
    hsl = np.asarray(hsl, dtype=float)
    unit = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    return np_unit_to_channel(unit)
