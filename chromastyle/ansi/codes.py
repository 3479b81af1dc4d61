"""SGR (Select Graphic Rendition) codes and their numeric parameters."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple, Union

from boundednumbers import clamp

from ..colors.rgb import RGBColor8
from .palette import BasicPalette

SGRValue = Union[int, BasicPalette, RGBColor8, None]


class SGRKind(Enum):
    RESET = "reset"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    TEXT_BASIC = "text_basic"
    TEXT_BASIC_BRIGHT = "text_basic_bright"
    TEXT_256 = "text_256"
    TEXT_RGB = "text_rgb"
    BACKGROUND_BASIC = "background_basic"
    BACKGROUND_BASIC_BRIGHT = "background_basic_bright"
    BACKGROUND_256 = "background_256"
    BACKGROUND_RGB = "background_rgb"


_FIXED = {
    SGRKind.RESET: 0,
    SGRKind.BOLD: 1,
    SGRKind.ITALIC: 3,
    SGRKind.UNDERLINE: 4,
}

# base parameter for the palette kinds; the palette index is added to it
_PALETTE_BASE = {
    SGRKind.TEXT_BASIC: 30,
    SGRKind.TEXT_BASIC_BRIGHT: 90,
    SGRKind.BACKGROUND_BASIC: 40,
    SGRKind.BACKGROUND_BASIC_BRIGHT: 100,
}

# leading parameter for the extended color kinds
_EXTENDED_LEAD = {
    SGRKind.TEXT_256: 38,
    SGRKind.TEXT_RGB: 38,
    SGRKind.BACKGROUND_256: 48,
    SGRKind.BACKGROUND_RGB: 48,
}


@dataclass(frozen=True)
class SGR:
    """
    A single SGR code.

    Build instances with the class constants and constructors rather than
    the raw initializer:

    >>> SGR.text_rgb(RGBColor8(255, 0, 0)).parameters()
    (38, 2, 255, 0, 0)
    >>> SGR.BOLD.parameters()
    (1,)
    """
    kind: SGRKind
    value: SGRValue = None

    RESET: ClassVar["SGR"]
    BOLD: ClassVar["SGR"]
    ITALIC: ClassVar["SGR"]
    UNDERLINE: ClassVar["SGR"]

    @classmethod
    def text_basic(cls, color: BasicPalette) -> SGR:
        return cls(SGRKind.TEXT_BASIC, BasicPalette(color))

    @classmethod
    def text_basic_bright(cls, color: BasicPalette) -> SGR:
        return cls(SGRKind.TEXT_BASIC_BRIGHT, BasicPalette(color))

    @classmethod
    def text_256(cls, index: int) -> SGR:
        return cls(SGRKind.TEXT_256, int(clamp(index, 0, 255)))

    @classmethod
    def text_rgb(cls, color: RGBColor8) -> SGR:
        return cls(SGRKind.TEXT_RGB, color)

    @classmethod
    def background_basic(cls, color: BasicPalette) -> SGR:
        return cls(SGRKind.BACKGROUND_BASIC, BasicPalette(color))

    @classmethod
    def background_basic_bright(cls, color: BasicPalette) -> SGR:
        return cls(SGRKind.BACKGROUND_BASIC_BRIGHT, BasicPalette(color))

    @classmethod
    def background_256(cls, index: int) -> SGR:
        return cls(SGRKind.BACKGROUND_256, int(clamp(index, 0, 255)))

    @classmethod
    def background_rgb(cls, color: RGBColor8) -> SGR:
        return cls(SGRKind.BACKGROUND_RGB, color)

    def parameters(self) -> Tuple[int, ...]:
        """Return the numeric SGR parameters for this code."""
        if self.kind in _FIXED:
            return (_FIXED[self.kind],)
        if self.kind in _PALETTE_BASE:
            return (_PALETTE_BASE[self.kind] + int(self.value),)  # type: ignore[arg-type]
        lead = _EXTENDED_LEAD[self.kind]
        if isinstance(self.value, RGBColor8):
            return (lead, 2, *self.value.value)
        return (lead, 5, int(self.value))  # type: ignore[arg-type]


SGR.RESET = SGR(SGRKind.RESET)
SGR.BOLD = SGR(SGRKind.BOLD)
SGR.ITALIC = SGR(SGRKind.ITALIC)
SGR.UNDERLINE = SGR(SGRKind.UNDERLINE)


def sgr_parameters(codes: Tuple[SGR, ...] | list[SGR], separator: str = ";") -> str:
    """Join the parameters of ``codes`` the way they appear in a sequence."""
    return separator.join(str(p) for code in codes for p in code.parameters())

