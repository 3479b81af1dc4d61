"""Errors raised by chromastyle.

Only two operations can fail: building a gradient from a degenerate request
and rendering two gradients of different lengths onto one line. Everything
else clamps or normalizes its input instead.
"""


class ChromaStyleError(Exception):
    """Base class for all chromastyle errors."""


class InvalidGradientInput(ChromaStyleError, ValueError):
    """A gradient was requested with a non-positive length or no stops."""


class UnequalGradientLengths(ChromaStyleError, ValueError):
    """Foreground and background gradients have different point counts."""

    def __init__(self, foreground_length: int, background_length: int) -> None:
        self.foreground_length = foreground_length
        self.background_length = background_length
        super().__init__(
            f"Foreground gradient has {foreground_length} points but "
            f"background gradient has {background_length}"
        )
