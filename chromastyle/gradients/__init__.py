"""
Gradient Generation
===================

Builds a fixed-length sequence of colors from sparse ``(position, color)``
stops, interpolating in HSL space with shortest-arc hue.

>>> from chromastyle.colors import RGBColor8
>>> from chromastyle.gradients import create_gradient
>>> gradient = create_gradient(5, [(0.0, RGBColor8(255, 0, 0)), (1.0, RGBColor8(0, 0, 255))])
>>> gradient.rgb_points[0], gradient.rgb_points[-1]
(RGBColor8(255, 0, 0), RGBColor8(0, 0, 255))
"""

from .gradient import Gradient, create_gradient, interpolate_stops
from .hue import hue_lerp
from .stops import prepare_stops, stop_to_hsl

__all__ = [
    "Gradient",
    "create_gradient",
    "interpolate_stops",
    "hue_lerp",
    "prepare_stops",
    "stop_to_hsl",
]
