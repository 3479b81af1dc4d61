from __future__ import annotations
from typing import ClassVar, Sequence, Tuple, Union

from ..colors.hsl import HSLColor
from ..colors.rgb import RGBColor8
from ..exceptions import InvalidGradientInput
from ..gradients import Gradient
from ..styles import Background, Foreground, Style
from ..types.color_types import Axis, ColorStop, Layer
from ..utils import clamp_index
from .base import PerCharacterStyler

PointsInput = Union[Gradient, Sequence[Union[RGBColor8, HSLColor]]]


def points_to_rgb(points: PointsInput) -> Tuple[RGBColor8, ...]:
    if isinstance(points, Gradient):
        return points.rgb_points
    return tuple(p.to_rgb() if isinstance(p, HSLColor) else p for p in points)


class GradientStyler(PerCharacterStyler):
    """
    Colors one character per gradient point along one axis.

    ``axis`` picks the coordinate used as the index (``x`` for horizontal,
    ``y`` for vertical) and ``layer`` whether the point colors the text or
    the background. Indices outside the points saturate to the nearest end.
    """
    axis:  ClassVar[Axis]
    layer: ClassVar[Layer]

    def __init__(self, points: PointsInput) -> None:
        rgb_points = points_to_rgb(points)
        if not rgb_points:
            raise InvalidGradientInput(f"{self.__class__.__name__} needs at least one point")
        self.points = rgb_points

    @classmethod
    def from_stops(cls, length: int, stops: Sequence[ColorStop]) -> GradientStyler:
        """Build the gradient for ``length`` characters and wrap it."""
        return cls(Gradient.from_stops(length, stops))

    def color_for_position(self, x: int, y: int) -> RGBColor8:
        coordinate = x if self.axis is Axis.HORIZONTAL else y
        return self.points[clamp_index(coordinate, len(self.points))]

    def style_for_position(self, x: int, y: int) -> Style:
        color = self.color_for_position(x, y)
        if self.layer is Layer.FOREGROUND:
            return Style(foreground=[Foreground.rgb(color)])
        return Style(background=Background.rgb(color))

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(points={len(self.points)})"


class HorizontalForegroundStyler(GradientStyler):
    axis:  ClassVar[Axis] = Axis.HORIZONTAL
    layer: ClassVar[Layer] = Layer.FOREGROUND


class VerticalForegroundStyler(GradientStyler):
    axis:  ClassVar[Axis] = Axis.VERTICAL
    layer: ClassVar[Layer] = Layer.FOREGROUND


class HorizontalBackgroundStyler(GradientStyler):
    axis:  ClassVar[Axis] = Axis.HORIZONTAL
    layer: ClassVar[Layer] = Layer.BACKGROUND


class VerticalBackgroundStyler(GradientStyler):
    axis:  ClassVar[Axis] = Axis.VERTICAL
    layer: ClassVar[Layer] = Layer.BACKGROUND


styler_tuple_to_class: dict[tuple[Axis, Layer], type[GradientStyler]] = {
    (cls.axis, cls.layer): cls
    for cls in (
        HorizontalForegroundStyler,
        VerticalForegroundStyler,
        HorizontalBackgroundStyler,
        VerticalBackgroundStyler,
    )
}


def gradient_styler(axis: Axis, layer: Layer, points: PointsInput) -> GradientStyler:
    """Look up the styler class for ``(axis, layer)`` and build it."""
    return styler_tuple_to_class[(Axis(axis), Layer(layer))](points)
