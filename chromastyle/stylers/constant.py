from ..styles import Style
from .base import PerCharacterStyler


class ConstantStyler(PerCharacterStyler):
    """Returns the same style for every position."""

    def __init__(self, style: Style) -> None:
        self.style = style

    def style_for_position(self, x: int, y: int) -> Style:
        return self.style.copy()
