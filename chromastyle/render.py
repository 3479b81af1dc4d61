"""
Rendering helpers: stylers applied to text, dual gradients on one line, and
the output boundary that writes a finished string.
"""

from __future__ import annotations
import logging
import os
import sys
from typing import IO, Iterable, List, Optional, Union

from .ansi import RESET, SGR, SetGraphicsRendition
from .exceptions import UnequalGradientLengths
from .stylers import PerCharacterStyler
from .stylers.gradient import PointsInput, points_to_rgb

logger = logging.getLogger(__name__)

OutputTarget = Union[IO[str], str, "os.PathLike[str]"]


def apply_to_line(
    styler: PerCharacterStyler,
    line: str,
    line_index: int,
    add_newline: bool = True,
    reset: bool = True,
) -> str:
    """Style ``line`` as row ``line_index`` of a block."""
    return styler.apply_line(line, line_index, add_newline=add_newline, reset=reset)


def apply_to_lines(
    styler: PerCharacterStyler,
    lines: Iterable[str],
    add_newlines: bool = True,
    reset: bool = True,
) -> str:
    """Style each line with its zero-based index and concatenate the results."""
    return styler.apply_lines(lines, add_newlines=add_newlines, reset=reset)


def _fill(filler: str, width: int) -> str:
    return (filler * width)[:width]


def apply_dual_gradient(
    text: str,
    foreground: Optional[PointsInput] = None,
    background: Optional[PointsInput] = None,
    leading_filler: Optional[str] = None,
    trailing_filler: Optional[str] = None,
    reset: bool = True,
) -> str:
    """
    Color ``text`` with a foreground and/or background gradient.

    When the text is shorter than the gradients it is padded: with both
    fillers it is centered (the odd column goes to the trailing side), with
    one filler it is padded on that side only. Without fillers the text is
    centered as is and the uncovered columns are plain, uncolored spaces.
    Text longer than the gradients keeps the last gradient color.

    Args:
        text: The line to color.
        foreground: Points for the text color, or ``None``.
        background: Points for the background color, or ``None``.
        leading_filler: Character used to pad before the text.
        trailing_filler: Character used to pad after the text.
        reset: Append a style reset at the end.

    Raises:
        UnequalGradientLengths: both gradients are given with different lengths.
    """
    fg = points_to_rgb(foreground) if foreground is not None else None
    bg = points_to_rgb(background) if background is not None else None

    if fg is not None and bg is not None and len(fg) != len(bg):
        raise UnequalGradientLengths(len(fg), len(bg))

    gradient_length = max(len(fg or ()), len(bg or ()))
    if gradient_length == 0:
        return text

    leading = leading_filler or None
    trailing = trailing_filler or None

    working = text
    offset = 0
    extra = gradient_length - len(text)
    if extra > 0:
        if leading and trailing:
            before = extra // 2
            working = _fill(leading, before) + text + _fill(trailing, extra - before)
        elif leading:
            working = _fill(leading, extra) + text
        elif trailing:
            working = text + _fill(trailing, extra)
        else:
            offset = extra // 2

    parts: List[str] = []
    colored = False
    for i in range(max(len(working), gradient_length)):
        text_index = i - offset
        if not 0 <= text_index < len(working):
            if colored:
                parts.append(RESET.message)
                colored = False
            parts.append(" ")
            continue

        gradient_index = min(i, gradient_length - 1)
        codes: List[SGR] = []
        if fg:
            codes.append(SGR.text_rgb(fg[gradient_index]))
        if bg:
            codes.append(SGR.background_rgb(bg[gradient_index]))
        parts.append(f"{SetGraphicsRendition(codes).message}{working[text_index]}")
        colored = True

    if reset:
        parts.append(RESET.message)
    return "".join(parts)


def write_output(text: str, file: Optional[OutputTarget] = None) -> None:
    """
    Write a finished string to a stream or a file path.

    ``file`` defaults to ``sys.stdout``. Paths are opened, written as UTF-8
    and closed again; I/O errors propagate to the caller.
    """
    if file is None:
        file = sys.stdout

    if isinstance(file, (str, os.PathLike)):
        with open(file, "w", encoding="utf-8") as handle:
            handle.write(text)
        logger.debug("Wrote %d characters to %s", len(text), os.fspath(file))
        return

    file.write(text)
    logger.debug("Wrote %d characters to stream", len(text))
