from typing import Union

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HUE_360

HUE_HALF = HUE_360 / 2

HueValue = Union[float, NDArray]


def hue_lerp(h0: HueValue, h1: HueValue, t: HueValue) -> HueValue:
    """
    Interpolate hue along the shorter arc of the color wheel.

    The difference is moved by one turn when it exceeds half a turn, and the
    result is brought back into [0, 360) by a single add/subtract of 360.

    Args:
        h0: Start hue(s) in degrees [0, 360)
        h1: End hue(s) in degrees [0, 360)
        t: Interpolation coefficient(s) in [0, 1]

    Returns:
        Interpolated hue; a float for scalar inputs, otherwise an array.

    >>> hue_lerp(350.0, 10.0, 0.5)
    0.0
    """
    h0 = np.asarray(h0, dtype=float)
    h1 = np.asarray(h1, dtype=float)
    t = np.asarray(t, dtype=float)

    diff = h1 - h0
    adjusted = np.where(
        np.abs(diff) > HUE_HALF,
        np.where(diff > 0, diff - HUE_360, diff + HUE_360),
        diff,
    )
    result = h0 + adjusted * t
    result = np.where(
        result < 0,
        result + HUE_360,
        np.where(result >= HUE_360, result - HUE_360, result),
    )
    if result.ndim == 0:
        return float(result)
    return result
