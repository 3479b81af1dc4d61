import math
import numpy as np
from numpy import ndarray as NDArray


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using the CSS Color 4 algorithm.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = m1, m2, 2 * l - m1
    elif hue_section == 1:
        r, g, b = m2, m1, 2 * l - m1
    elif hue_section == 2:
        r, g, b = 2 * l - m1, m1, m2
    elif hue_section == 3:
        r, g, b = 2 * l - m1, m2, m1
    elif hue_section == 4:
        r, g, b = m2, 2 * l - m1, m1
    elif hue_section == 5:
        r, g, b = m1, 2 * l - m1, m2
    else:
        r, g, b = 2 * l - m1, 2 * l - m1, 2 * l - m1

    return r, g, b

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 algorithm.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = np.floor(h / 60).astype(int)

    # (r, g, b) picked per hue section, same table as the scalar version
    r = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2,
         hue_section == 3, hue_section == 4, hue_section == 5],
        [m1, m2, low, low, m2, m1],
        default=low,
    )
    g = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2,
         hue_section == 3, hue_section == 4, hue_section == 5],
        [m2, m1, m1, m2, low, low],
        default=low,
    )
    b = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2,
         hue_section == 3, hue_section == 4, hue_section == 5],
        [low, low, m2, m1, m1, m2],
        default=low,
    )

    return np.stack([r, g, b], axis=-1)
