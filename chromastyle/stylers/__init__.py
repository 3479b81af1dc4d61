"""
Per-character stylers
=====================

A styler answers one question: which :class:`~chromastyle.styles.Style`
does the character at ``(x, y)`` get? Variants:

- ``ConstantStyler``: the same style everywhere
- ``HorizontalForegroundStyler`` / ``HorizontalBackgroundStyler``: color
  picked by column
- ``VerticalForegroundStyler`` / ``VerticalBackgroundStyler``: color picked
  by row
- ``JoinedStyler``: two stylers merged, the second winning on conflict
"""

from .base import PerCharacterStyler
from .constant import ConstantStyler
from .gradient import (
    GradientStyler,
    HorizontalBackgroundStyler,
    HorizontalForegroundStyler,
    VerticalBackgroundStyler,
    VerticalForegroundStyler,
    gradient_styler,
    points_to_rgb,
    styler_tuple_to_class,
)
from .joined import JoinedStyler

__all__ = [
    "PerCharacterStyler",
    "ConstantStyler",
    "GradientStyler",
    "HorizontalBackgroundStyler",
    "HorizontalForegroundStyler",
    "VerticalBackgroundStyler",
    "VerticalForegroundStyler",
    "gradient_styler",
    "points_to_rgb",
    "styler_tuple_to_class",
    "JoinedStyler",
]
