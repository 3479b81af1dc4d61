"""
Styles
======

``Style`` holds at most one background and one foreground attribute per
category (bold, color, italic, underline). Merging follows one rule: a
category supplied by the incoming style replaces the existing one, every
other attribute survives in its original order.

>>> from chromastyle.styles import Style, Background, Foreground
>>> merged = merge(
...     Style(background=Background.color256(5), foreground=[Foreground.color256(10)]),
...     Style(background=Background.color256(20)),
... )
>>> merged == Style(background=Background.color256(20), foreground=[Foreground.color256(10)])
True
"""

from .attributes import (
    Background,
    BackgroundKind,
    Category,
    Foreground,
    ForegroundKind,
)
from .style import (
    BackgroundPolicy,
    DEFAULT_BACKGROUND_POLICY,
    Style,
    add_foregrounds,
    merge,
)

__all__ = [
    'Background',
    'BackgroundKind',
    'Category',
    'Foreground',
    'ForegroundKind',
    'BackgroundPolicy',
    'DEFAULT_BACKGROUND_POLICY',
    'Style',
    'add_foregrounds',
    'merge',
]
