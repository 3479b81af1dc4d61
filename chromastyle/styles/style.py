from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from ..ansi import RESET, SGR, SetGraphicsRendition
from ..utils import value_or_default
from .attributes import Background, Category, Foreground


class BackgroundPolicy(Enum):
    """
    What adding a missing (``None``) background does.

    KEEP:      leave the existing background alone (default)
    OVERWRITE: clear the existing background
    """
    KEEP = "keep"
    OVERWRITE = "overwrite"


DEFAULT_BACKGROUND_POLICY = BackgroundPolicy.KEEP


def add_foregrounds(foregrounds: Iterable[Foreground], target: List[Foreground]) -> List[Foreground]:
    """
    Return ``target`` with ``foregrounds`` added, overriding on conflict.

    Attributes of ``target`` whose category is supplied by ``foregrounds``
    are dropped; the survivors keep their order and the new attributes are
    appended in category order (bold, color, italic, underline). Within
    ``foregrounds`` the last attribute of a category wins.
    """
    incoming = {}
    for fg in foregrounds:
        incoming[fg.category] = fg

    merged = [fg for fg in target if fg.category not in incoming]
    merged.extend(incoming[category] for category in Category if category in incoming)
    return merged


@dataclass
class Style:
    """
    A background and an ordered list of foreground attributes.

    Both are optional. The ``add*`` methods change this style in place; the
    ``adding*`` methods return a new, independent style.

    >>> from chromastyle.ansi import BasicPalette
    >>> style = Style(foreground=[Foreground.color256(10), Foreground.ITALIC])
    >>> [fg.kind.name for fg in style.adding_foreground(Foreground.basic(BasicPalette.GREEN)).foreground]
    ['ITALIC', 'COLOR_BASIC']
    """
    background: Optional[Background] = None
    foreground: List[Foreground] = field(default_factory=list)

    def __post_init__(self) -> None:
        # never alias a caller's list
        self.foreground = list(self.foreground)

    def copy(self) -> Style:
        return Style(background=self.background, foreground=self.foreground)

    # ------------------ IN-PLACE ------------------
    def add(self, style: Style, background_policy: Optional[BackgroundPolicy] = None) -> None:
        """Add the contents of ``style``, overriding this style where they conflict."""
        self.add_foregrounds(style.foreground)
        self.add_background(style.background, background_policy)

    def add_foregrounds(self, foregrounds: Iterable[Foreground]) -> None:
        self.foreground = add_foregrounds(foregrounds, self.foreground)

    def add_foreground(self, foreground: Foreground) -> None:
        self.add_foregrounds([foreground])

    def add_background(
        self,
        background: Optional[Background],
        policy: Optional[BackgroundPolicy] = None,
    ) -> None:
        """
        Set the background.

        With the default ``KEEP`` policy a ``None`` background has no effect;
        use ``Background.NO_BACKGROUND`` to unset it.
        """
        policy = value_or_default(policy, DEFAULT_BACKGROUND_POLICY)
        if background is not None or policy is BackgroundPolicy.OVERWRITE:
            self.background = background

    # ------------------ COPYING ------------------
    def adding(self, style: Style, background_policy: Optional[BackgroundPolicy] = None) -> Style:
        value = self.copy()
        value.add(style, background_policy)
        return value

    def adding_foregrounds(self, foregrounds: Iterable[Foreground]) -> Style:
        value = self.copy()
        value.add_foregrounds(foregrounds)
        return value

    def adding_foreground(self, foreground: Foreground) -> Style:
        value = self.copy()
        value.add_foreground(foreground)
        return value

    def adding_background(
        self,
        background: Optional[Background],
        policy: Optional[BackgroundPolicy] = None,
    ) -> Style:
        value = self.copy()
        value.add_background(background, policy)
        return value

    # ------------------ OUTPUT ------------------
    @property
    def sgr_codes(self) -> List[SGR]:
        """Foreground codes in style order, then the background code if any."""
        codes = [fg.sgr for fg in self.foreground]
        bg_sgr = self.background.sgr if self.background is not None else None
        if bg_sgr is not None:
            codes.append(bg_sgr)
        return codes

    @property
    def control_code(self) -> SetGraphicsRendition:
        return SetGraphicsRendition(self.sgr_codes)

    @property
    def escape(self) -> str:
        return self.control_code.message

    def apply(self, text: str) -> str:
        """Wrap ``text`` in this style and a trailing reset."""
        return f"{self.escape}{text}{RESET.message}"


def merge(
    base: Style,
    incoming: Style,
    background_policy: Optional[BackgroundPolicy] = None,
) -> Style:
    """Return a new style: ``base`` overridden by ``incoming`` where they conflict."""
    return base.adding(incoming, background_policy)
