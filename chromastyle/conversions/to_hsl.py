import numpy as np
from numpy import ndarray as NDArray


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL using the standard max/min algorithm.

    Args:
        r: Red in [0, 1]
        g: Green in [0, 1]
        b: Blue in [0, 1]

    Returns:
        Tuple[float, float, float]: (h, s, l) with h in degrees [0, 360),
        s and l in [0, 1]. Achromatic colors get h = 0.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2
    delta = max_c - min_c

    if delta == 0:
        return 0.0, 0.0, l

    s = delta / (1 - abs(2 * l - 1))

    if max_c == r:
        h = 60 * (((g - b) / delta) % 6)
    elif max_c == g:
        h = 60 * ((b - r) / delta + 2)
    else:
        h = 60 * ((r - g) / delta + 4)

    return h % 360, min(s, 1.0), l


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r: array-like or scalar, red in [0, 1]
        g: array-like or scalar, green in [0, 1]
        b: array-like or scalar, blue in [0, 1]

    Returns:
        hsl: array of shape (..., 3): (h, s, l)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    r, g, b = np.broadcast_arrays(r, g, b)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    l = (max_c + min_c) / 2
    delta = max_c - min_c
    chromatic = delta != 0

    # Avoid division by zero on achromatic entries; they are masked out below
    safe_delta = np.where(chromatic, delta, 1.0)
    denom = 1 - np.abs(2 * l - 1)
    safe_denom = np.where(chromatic & (denom != 0), denom, 1.0)
    s = np.where(chromatic, np.minimum(delta / safe_denom, 1.0), 0.0)

    h = np.zeros_like(max_c)
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & (max_c == g) & ~mask_r
    mask_b = chromatic & ~mask_r & ~mask_g

    h[mask_r] = 60 * (((g[mask_r] - b[mask_r]) / safe_delta[mask_r]) % 6)
    h[mask_g] = 60 * ((b[mask_g] - r[mask_g]) / safe_delta[mask_g] + 2)
    h[mask_b] = 60 * ((r[mask_b] - g[mask_b]) / safe_delta[mask_b] + 4)

    return np.stack([h % 360, s, l], axis=-1)
