"""Foreground and background attributes as tagged values."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from ..ansi import SGR, BasicPalette
from ..colors.rgb import RGBColor8

AttributeValue = Union[int, BasicPalette, RGBColor8, None]


class Category(Enum):
    """
    Exclusive foreground categories. A style holds at most one attribute per
    category. Definition order is the order overrides are appended in.
    """
    BOLD = "bold"
    COLOR = "color"
    ITALIC = "italic"
    UNDERLINE = "underline"


class ForegroundKind(Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    COLOR_256 = "color_256"
    COLOR_BASIC = "color_basic"
    COLOR_BASIC_BRIGHT = "color_basic_bright"
    COLOR_RGB = "color_rgb"


_FOREGROUND_CATEGORY = {
    ForegroundKind.BOLD: Category.BOLD,
    ForegroundKind.ITALIC: Category.ITALIC,
    ForegroundKind.UNDERLINE: Category.UNDERLINE,
    ForegroundKind.COLOR_256: Category.COLOR,
    ForegroundKind.COLOR_BASIC: Category.COLOR,
    ForegroundKind.COLOR_BASIC_BRIGHT: Category.COLOR,
    ForegroundKind.COLOR_RGB: Category.COLOR,
}


@dataclass(frozen=True)
class Foreground:
    """
    A foreground attribute: bold, italic, underline or a text color.

    >>> Foreground.BOLD.category
    <Category.BOLD: 'bold'>
    >>> Foreground.rgb(RGBColor8(255, 0, 0)).sgr.parameters()
    (38, 2, 255, 0, 0)
    """
    kind: ForegroundKind
    value: AttributeValue = None

    BOLD: ClassVar["Foreground"]
    ITALIC: ClassVar["Foreground"]
    UNDERLINE: ClassVar["Foreground"]

    @classmethod
    def color256(cls, index: int) -> Foreground:
        return cls(ForegroundKind.COLOR_256, int(index))

    @classmethod
    def basic(cls, color: BasicPalette) -> Foreground:
        return cls(ForegroundKind.COLOR_BASIC, BasicPalette(color))

    @classmethod
    def basic_bright(cls, color: BasicPalette) -> Foreground:
        return cls(ForegroundKind.COLOR_BASIC_BRIGHT, BasicPalette(color))

    @classmethod
    def rgb(cls, color: RGBColor8) -> Foreground:
        return cls(ForegroundKind.COLOR_RGB, color)

    @property
    def category(self) -> Category:
        return _FOREGROUND_CATEGORY[self.kind]

    @property
    def is_color(self) -> bool:
        return self.category is Category.COLOR

    @property
    def sgr(self) -> SGR:
        kind = self.kind
        if kind is ForegroundKind.BOLD:
            return SGR.BOLD
        if kind is ForegroundKind.ITALIC:
            return SGR.ITALIC
        if kind is ForegroundKind.UNDERLINE:
            return SGR.UNDERLINE
        if kind is ForegroundKind.COLOR_256:
            return SGR.text_256(self.value)  # type: ignore[arg-type]
        if kind is ForegroundKind.COLOR_BASIC:
            return SGR.text_basic(self.value)  # type: ignore[arg-type]
        if kind is ForegroundKind.COLOR_BASIC_BRIGHT:
            return SGR.text_basic_bright(self.value)  # type: ignore[arg-type]
        return SGR.text_rgb(self.value)  # type: ignore[arg-type]


Foreground.BOLD = Foreground(ForegroundKind.BOLD)
Foreground.ITALIC = Foreground(ForegroundKind.ITALIC)
Foreground.UNDERLINE = Foreground(ForegroundKind.UNDERLINE)


class BackgroundKind(Enum):
    COLOR_256 = "color_256"
    COLOR_BASIC = "color_basic"
    COLOR_BASIC_BRIGHT = "color_basic_bright"
    COLOR_RGB = "color_rgb"
    NO_BACKGROUND = "no_background"


@dataclass(frozen=True)
class Background:
    """
    A background color.

    ``Background.NO_BACKGROUND`` is an explicit "unset" that still overrides
    an existing background when merged, unlike a missing (``None``) one. It
    produces no SGR code.
    """
    kind: BackgroundKind
    value: AttributeValue = None

    NO_BACKGROUND: ClassVar["Background"]

    @classmethod
    def color256(cls, index: int) -> Background:
        return cls(BackgroundKind.COLOR_256, int(index))

    @classmethod
    def basic(cls, color: BasicPalette) -> Background:
        return cls(BackgroundKind.COLOR_BASIC, BasicPalette(color))

    @classmethod
    def basic_bright(cls, color: BasicPalette) -> Background:
        return cls(BackgroundKind.COLOR_BASIC_BRIGHT, BasicPalette(color))

    @classmethod
    def rgb(cls, color: RGBColor8) -> Background:
        return cls(BackgroundKind.COLOR_RGB, color)

    @property
    def sgr(self) -> Optional[SGR]:
        kind = self.kind
        if kind is BackgroundKind.COLOR_256:
            return SGR.background_256(self.value)  # type: ignore[arg-type]
        if kind is BackgroundKind.COLOR_BASIC:
            return SGR.background_basic(self.value)  # type: ignore[arg-type]
        if kind is BackgroundKind.COLOR_BASIC_BRIGHT:
            return SGR.background_basic_bright(self.value)  # type: ignore[arg-type]
        if kind is BackgroundKind.COLOR_RGB:
            return SGR.background_rgb(self.value)  # type: ignore[arg-type]
        return None


Background.NO_BACKGROUND = Background(BackgroundKind.NO_BACKGROUND)
