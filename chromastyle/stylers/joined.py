from typing import Optional

from ..styles import BackgroundPolicy, Style, merge
from .base import PerCharacterStyler


class JoinedStyler(PerCharacterStyler):
    """
    Two stylers evaluated at the same position and merged.

    Values from ``styler2`` override those from ``styler1`` on conflict.
    """

    def __init__(
        self,
        styler1: PerCharacterStyler,
        styler2: PerCharacterStyler,
        background_policy: Optional[BackgroundPolicy] = None,
    ) -> None:
        self.styler1 = styler1
        self.styler2 = styler2
        self.background_policy = background_policy

    def style_for_position(self, x: int, y: int) -> Style:
        return merge(
            self.styler1.style_for_position(x, y),
            self.styler2.style_for_position(x, y),
            self.background_policy,
        )
