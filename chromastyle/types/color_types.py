from __future__ import annotations
from enum import Enum
from typing import Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..colors.rgb import RGBColor8
    from ..colors.hsl import HSLColor

Scalar = int | float
RGBTuple = Tuple[int, int, int]
HSLTuple = Tuple[float, float, float]
# (fractional position on the line, color at that position)
ColorStop = Tuple[float, Union["HSLColor", "RGBColor8"]]

HUE_360 = 360.0


class Axis(str, Enum):
    """Which coordinate a gradient styler follows."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Layer(str, Enum):
    """Which part of the cell a gradient styler colors."""
    FOREGROUND = "foreground"
    BACKGROUND = "background"
