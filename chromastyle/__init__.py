"""
Chromastyle - Styled and Gradient Terminal Text
===============================================

Composes terminal text attributes, merges them deterministically and renders
HSL gradients across lines and blocks of text as SGR escape sequences.

Key Features
------------
- RGB (8-bit) and HSL color value types with round-trip conversion
- Styles with one attribute per category and order-preserving merges
- Multi-stop gradients interpolated in HSL with shortest-arc hue
- Per-character stylers: constant, horizontal, vertical and joined
- Dual foreground/background gradients on a single line with padding
- A small output-tree composer flattened to a single escape-coded string

Quick Start
-----------
>>> from chromastyle import RGBColor8, Style, Foreground, HorizontalForegroundStyler
>>>
>>> red = Style(foreground=[Foreground.rgb(RGBColor8(255, 0, 0))])
>>> red.apply("Hello")
'\\x1b[38;2;255;0;0mHello\\x1b[0m'
>>>
>>> styler = HorizontalForegroundStyler.from_stops(
...     5, [(0.0, RGBColor8(0, 0, 0x90)), (1.0, RGBColor8(0, 0, 0x40))]
... )
>>> line = styler.apply_line("Hello", 0)

Modules
-------
- colors: RGBColor8 and HSLColor value types
- conversions: scalar and vectorized RGB <-> HSL functions
- ansi: SGR codes and control sequences
- styles: Foreground, Background, Style and merge rules
- gradients: gradient generation from stops
- stylers: per-character stylers
- render: applying stylers, dual gradients, writing output
- builder: output-tree composer
"""

from .colors import RGBColor8, HSLColor
from .ansi import BasicPalette, SGR, Literal, SetGraphicsRendition, RESET
from .styles import (
    Background,
    BackgroundPolicy,
    Category,
    Foreground,
    Style,
    merge,
)
from .gradients import Gradient, create_gradient, hue_lerp
from .stylers import (
    PerCharacterStyler,
    ConstantStyler,
    GradientStyler,
    HorizontalForegroundStyler,
    VerticalForegroundStyler,
    HorizontalBackgroundStyler,
    VerticalBackgroundStyler,
    JoinedStyler,
)
from .render import apply_to_line, apply_to_lines, apply_dual_gradient, write_output
from .builder import (
    styled_output,
    text,
    with_foreground,
    with_background,
    with_style,
    group,
    flatten,
    render,
    print_styled,
    write_styled,
)
from .exceptions import ChromaStyleError, InvalidGradientInput, UnequalGradientLengths

__version__ = "0.1.0"

__all__ = [
    "RGBColor8",
    "HSLColor",
    "BasicPalette",
    "SGR",
    "Literal",
    "SetGraphicsRendition",
    "RESET",
    "Background",
    "BackgroundPolicy",
    "Category",
    "Foreground",
    "Style",
    "merge",
    "Gradient",
    "create_gradient",
    "hue_lerp",
    "PerCharacterStyler",
    "ConstantStyler",
    "GradientStyler",
    "HorizontalForegroundStyler",
    "VerticalForegroundStyler",
    "HorizontalBackgroundStyler",
    "VerticalBackgroundStyler",
    "JoinedStyler",
    "apply_to_line",
    "apply_to_lines",
    "apply_dual_gradient",
    "write_output",
    "styled_output",
    "text",
    "with_foreground",
    "with_background",
    "with_style",
    "group",
    "flatten",
    "render",
    "print_styled",
    "write_styled",
    "ChromaStyleError",
    "InvalidGradientInput",
    "UnequalGradientLengths",
]
