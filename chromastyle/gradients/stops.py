from __future__ import annotations
import warnings
from typing import Sequence, Tuple

import numpy as np

from ..colors.hsl import HSLColor
from ..colors.rgb import RGBColor8
from ..types.color_types import ColorStop


def stop_to_hsl(color: HSLColor | RGBColor8) -> HSLColor:
    if isinstance(color, HSLColor):
        return color
    if isinstance(color, RGBColor8):
        return color.to_hsl()
    raise TypeError(f"Gradient stop colors must be HSLColor or RGBColor8, got {type(color).__name__}")


def prepare_stops(stops: Sequence[ColorStop]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sort stops by position and split them into arrays.

    The sort is stable, so among stops sharing a position the one listed
    later in ``stops`` also comes later here.

    Returns:
        (positions of shape (n,), HSL values of shape (n, 3))
    """
    ordered = sorted(stops, key=lambda stop: stop[0])

    positions = np.array([float(position) for position, _ in ordered], dtype=float)
    if np.any((positions < 0.0) | (positions > 1.0)):
        warnings.warn(
            f"Gradient stop positions should be within [0, 1], got {positions.tolist()}",
            UserWarning,
            stacklevel=3,
        )

    values = np.array([stop_to_hsl(color).value for _, color in ordered], dtype=float)
    return positions, values
