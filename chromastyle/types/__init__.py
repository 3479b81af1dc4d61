from .color_types import Scalar, RGBTuple, HSLTuple, ColorStop, Axis, Layer

__all__ = ["Scalar", "RGBTuple", "HSLTuple", "ColorStop", "Axis", "Layer"]
