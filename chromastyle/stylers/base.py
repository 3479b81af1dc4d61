from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Optional, TYPE_CHECKING

from ..ansi import RESET
from ..styles import BackgroundPolicy, Style

if TYPE_CHECKING:
    from .joined import JoinedStyler


class PerCharacterStyler(ABC):
    """Produces a :class:`Style` for a zero-based ``(x, y)`` character position."""

    @abstractmethod
    def style_for_position(self, x: int, y: int) -> Style:
        ...

    def apply_line(
        self,
        line: str,
        line_index: int,
        add_newline: bool = True,
        reset: bool = True,
    ) -> str:
        """
        Style one line of text.

        Every character is preceded by its own SGR sequence; identical
        neighbouring sequences are not merged.

        Args:
            line: The line to style.
            line_index: The index of this line in a larger block of text.
            add_newline: Append a newline to the end of the line.
            reset: Append a style reset, before the added newline.
        """
        parts = [
            f"{self.style_for_position(x, line_index).escape}{char}"
            for x, char in enumerate(line)
        ]
        if reset:
            parts.append(RESET.message)
        if add_newline:
            parts.append("\n")
        return "".join(parts)

    def apply_lines(
        self,
        lines: Iterable[str],
        add_newlines: bool = True,
        reset: bool = True,
    ) -> str:
        """Style a block of lines; line ``n`` is styled with ``y = n``."""
        return "".join(
            self.apply_line(line, index, add_newline=add_newlines, reset=reset)
            for index, line in enumerate(lines)
        )

    def joined(
        self,
        other: PerCharacterStyler,
        background_policy: Optional[BackgroundPolicy] = None,
    ) -> JoinedStyler:
        """Combine with ``other``; ``other`` wins where the styles conflict."""
        from .joined import JoinedStyler
        return JoinedStyler(self, other, background_policy=background_policy)
